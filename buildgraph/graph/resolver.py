from __future__ import annotations

from buildgraph.registry import Task, TaskRegistry
from buildgraph.result import UnknownTaskError


def resolve_task(
    registry: TaskRegistry, name: str, parent: Task | None = None
) -> list[Task]:
    """
    Expand a requested name into tasks.

    `*:suffix` matches every task whose name ends with `:suffix`, in
    registration order, and may match nothing. Any other name must be
    registered exactly, otherwise `UnknownTaskError` is raised.
    """
    prefix, _, suffix = name.partition(":")

    if prefix == "*":
        return [task for task in registry if task.name.endswith(f":{suffix}")]

    if registry.has_task(name):
        return [registry.get(name)]

    raise UnknownTaskError(name, parent.name if parent is not None else None)
