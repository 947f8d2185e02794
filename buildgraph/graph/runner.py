from __future__ import annotations

import logging
from enum import Enum, auto

from buildgraph.executor import exec_task
from buildgraph.registry import Task, TaskRegistry
from buildgraph.report import NullReporter, Reporter
from buildgraph.result import (
    DependencyFailedError,
    Result,
    UnknownTaskError,
    failure,
    success,
)

from .resolver import resolve_task
from .types import CycleError

LOGGER = logging.getLogger(__name__)


class TaskState(Enum):
    UNVISITED = auto()
    RUNNING = auto()
    SUCCEEDED = auto()
    FAILED = auto()


class _Run:
    """State of a single `GraphRunner.run` call."""

    def __init__(self, registry: TaskRegistry, reporter: Reporter) -> None:
        self.registry = registry
        self.reporter = reporter
        self.finished: dict[Task, Result] = {}
        self.stack: list[Task] = []

    def state(self, task: Task) -> TaskState:
        if task in self.finished:
            if self.finished[task].is_success():
                return TaskState.SUCCEEDED
            return TaskState.FAILED
        if task in self.stack:
            return TaskState.RUNNING
        return TaskState.UNVISITED

    async def execute(self, task: Task) -> Result:
        match self.state(task):
            case TaskState.SUCCEEDED | TaskState.FAILED:
                return self.finished[task]
            case TaskState.RUNNING:
                start = self.stack.index(task)
                cycle = [t.name for t in self.stack[start:]] + [task.name]
                result = failure(CycleError(cycle))
                self.reporter.on_failure_detail(result.error)
                return result

        self.stack.append(task)
        try:
            result = await self._execute_unvisited(task)
        finally:
            self.stack.pop()

        self.finished[task] = result
        if result.is_failure():
            self.reporter.on_failure_detail(result.error)
        return result

    async def _execute_unvisited(self, task: Task) -> Result:
        failed = False

        for name in task.deps:
            try:
                deps = resolve_task(self.registry, name, task)
            except UnknownTaskError as exc:
                return failure(exc)

            for dep in deps:
                result = await self.execute(dep)
                if result.is_failure():
                    failed = True

        if failed:
            LOGGER.debug("Skipping '%s': a dependency failed", task.name)
            return failure(DependencyFailedError(task.name))

        return await exec_task(task, self.reporter)


class GraphRunner:
    """
    Runs tasks of a registry together with their dependencies.

    Within one `run` call every task executes at most once; later references
    to it observe the same result.
    """

    def __init__(self, registry: TaskRegistry, reporter: Reporter | None = None):
        self.registry = registry
        self.reporter = reporter or NullReporter()

    async def run(self, *names: str) -> Result[None]:
        state = _Run(self.registry, self.reporter)

        for name in names:
            try:
                tasks = resolve_task(self.registry, name)
            except UnknownTaskError as exc:
                self.reporter.on_failure_detail(exc)
                return failure(exc)

            for task in tasks:
                result = await state.execute(task)
                if result.is_failure():
                    return result

        return success(None)

    async def execute(self, task: Task) -> Result:
        """Execute a single task with a fresh cache."""
        return await _Run(self.registry, self.reporter).execute(task)
