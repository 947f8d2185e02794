from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    error: Exception

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure]


def success(value: T = None) -> Success[T]:
    return Success(value)


def failure(error: Exception) -> Failure:
    return Failure(error)


class BuildError(Exception):
    def __init__(self, component: str, message: str) -> None:
        super().__init__(message)
        self.component = component
        self.message = message


class UnknownTaskError(BuildError):
    def __init__(self, name: str, parent: str | None = None) -> None:
        message = f"unknown task '{name}'"
        if parent is not None:
            message += f" referenced from '{parent}'"
        super().__init__("build", message)
        self.name = name
        self.parent = parent


class DependencyFailedError(BuildError):
    """The task was skipped because at least one of its dependencies failed."""

    def __init__(self, task_name: str) -> None:
        super().__init__(task_name, f"task '{task_name}' failed")
