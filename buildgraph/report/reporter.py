from __future__ import annotations

import logging

from buildgraph.result import BuildError

from .types import Outcome

LOGGER = logging.getLogger(__name__)


def format_duration(duration_ms: float) -> str:
    if duration_ms >= 1000:
        return f"{duration_ms / 1000:.2f} s"
    return f"{int(duration_ms)} ms"


class NullReporter:
    def on_start(self, name: str) -> None:
        pass

    def on_finish(self, name: str, outcome: Outcome, duration_ms: float) -> None:
        pass

    def on_failure_detail(self, error: Exception) -> None:
        pass


class LoggingReporter:
    """
    Reports task lifecycle through the `logging` module.

    Build errors are one-line diagnostics; anything else raised by an action
    is logged with its traceback.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or LOGGER

    def on_start(self, name: str) -> None:
        self.logger.info("Starting '%s'...", name)

    def on_finish(self, name: str, outcome: Outcome, duration_ms: float) -> None:
        verb = "Finished" if outcome is Outcome.SUCCESS else "Failed"
        self.logger.info("%s '%s' after %s", verb, name, format_duration(duration_ms))

    def on_failure_detail(self, error: Exception) -> None:
        if isinstance(error, BuildError):
            self.logger.error("failed: %s", error.message)
        else:
            self.logger.error("%s", error, exc_info=error)
