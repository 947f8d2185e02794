from .graph import GraphRunner
from .registry import Task, TaskRegistry
from .result import BuildError, Failure, Result, Success, failure, success

__all__ = [
    "TaskRegistry",
    "Task",
    "GraphRunner",
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "BuildError",
]
