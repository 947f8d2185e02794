from __future__ import annotations

from enum import Enum
from typing import Protocol


class Outcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class Reporter(Protocol):
    def on_start(self, name: str) -> None: ...

    def on_finish(self, name: str, outcome: Outcome, duration_ms: float) -> None: ...

    def on_failure_detail(self, error: Exception) -> None: ...
