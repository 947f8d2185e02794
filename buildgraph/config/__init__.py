from .build import build_registry
from .loader import load_project
from .types import ConfigError, ProjectConfig, TaskConfig, UnsupportedConfigFormatError

__all__ = [
    "load_project",
    "build_registry",
    "ProjectConfig",
    "TaskConfig",
    "ConfigError",
    "UnsupportedConfigFormatError",
]
