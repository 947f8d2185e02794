from __future__ import annotations

import inspect
import logging
import time

from buildgraph.registry import Task
from buildgraph.report import Outcome, Reporter
from buildgraph.result import Failure, Result, Success, failure, success

LOGGER = logging.getLogger(__name__)


async def exec_task(task: Task, reporter: Reporter) -> Result:
    if task.action is None:
        LOGGER.debug("Finished '%s'", task.name)
        return success(None)

    reporter.on_start(task.name)
    start = time.monotonic()
    result: Result
    try:
        value = task.action()
        if inspect.isawaitable(value):
            value = await value
        if isinstance(value, (Success, Failure)):
            result = value
        else:
            result = success(value)
    except Exception as exc:
        result = failure(exc)
    duration_ms = (time.monotonic() - start) * 1000

    outcome = Outcome.SUCCESS if result.is_success() else Outcome.FAILURE
    reporter.on_finish(task.name, outcome, duration_ms)
    return result
