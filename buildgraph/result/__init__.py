from .types import (
    BuildError,
    DependencyFailedError,
    Failure,
    Result,
    Success,
    UnknownTaskError,
    failure,
    success,
)

__all__ = [
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "BuildError",
    "UnknownTaskError",
    "DependencyFailedError",
]
