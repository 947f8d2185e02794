from .registry import TaskRegistry
from .types import Action, Task

__all__ = ["TaskRegistry", "Task", "Action"]
