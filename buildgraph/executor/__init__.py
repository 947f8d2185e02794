from .executor import exec_task
from .shell import shell_action
from .types import CommandOutput

__all__ = ["exec_task", "shell_action", "CommandOutput"]
