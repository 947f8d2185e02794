from .plan import plan_order
from .resolver import resolve_task
from .runner import GraphRunner, TaskState
from .types import CycleError, GraphError

__all__ = [
    "GraphRunner",
    "TaskState",
    "resolve_task",
    "plan_order",
    "GraphError",
    "CycleError",
]
