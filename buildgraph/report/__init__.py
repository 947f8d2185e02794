from .reporter import LoggingReporter, NullReporter, format_duration
from .types import Outcome, Reporter

__all__ = ["Reporter", "Outcome", "LoggingReporter", "NullReporter", "format_duration"]
