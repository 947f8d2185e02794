from __future__ import annotations

from enum import Enum, auto
from typing import Iterable

from buildgraph.registry import Task, TaskRegistry

from .resolver import resolve_task
from .types import CycleError


class _Visit(Enum):
    UNVISITED = auto()
    VISITING = auto()
    VISITED = auto()


def plan_order(registry: TaskRegistry, names: Iterable[str]) -> list[str]:
    """Names of the tasks `run(*names)` would execute, in order, if all succeed."""
    state: dict[Task, _Visit] = {}
    out: list[str] = []
    stack: list[Task] = []

    def visit(task: Task) -> None:
        if state.get(task, _Visit.UNVISITED) == _Visit.VISITING:
            start = stack.index(task)
            raise CycleError([t.name for t in stack[start:]] + [task.name])
        if state.get(task) == _Visit.VISITED:
            return

        state[task] = _Visit.VISITING
        stack.append(task)

        for name in task.deps:
            for dep in resolve_task(registry, name, task):
                visit(dep)

        stack.pop()
        state[task] = _Visit.VISITED
        out.append(task.name)

    for name in names:
        for task in resolve_task(registry, name):
            visit(task)

    return out
