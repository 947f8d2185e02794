from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .types import Action, Task

LOGGER = logging.getLogger(__name__)


class TaskRegistry:
    """Name to task mapping, kept in registration order."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks.values()))

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def register(
        self,
        name: str,
        deps: Iterable[str] = (),
        action: Action | None = None,
    ) -> Task:
        if name in self._tasks:
            LOGGER.warning("Task '%s' is registered again, replacing it", name)

        task = Task(name, tuple(deps), action)
        self._tasks[name] = task
        return task

    def has_task(self, name: str) -> bool:
        return name in self._tasks

    def get(self, name: str) -> Task:
        if not self.has_task(name):
            raise KeyError(name)

        return self._tasks[name]

    def list_names(self) -> list[str]:
        return list(self._tasks)
