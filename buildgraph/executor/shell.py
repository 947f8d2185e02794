from __future__ import annotations

import asyncio
import logging
import os
from typing import Awaitable, Callable, Mapping

from buildgraph.result import BuildError, Result, failure, success

from .types import CommandOutput

LOGGER = logging.getLogger(__name__)

_STDERR_TAIL_LINES = 10


def shell_action(
    command: str,
    *,
    component: str = "shell",
    env: Mapping[str, str] | None = None,
    working_dir: str | None = None,
) -> Callable[[], Awaitable[Result[CommandOutput]]]:
    async def action() -> Result[CommandOutput]:
        LOGGER.debug("%s: running %r", component, command)
        proc = await asyncio.create_subprocess_shell(
            command,
            cwd=working_dir or None,
            env={**os.environ, **(env or {})},
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        raw_out, raw_err = await proc.communicate()
        output = CommandOutput(
            command,
            proc.returncode,
            raw_out.decode(errors="replace"),
            raw_err.decode(errors="replace"),
        )

        for line in output.stdout.splitlines():
            LOGGER.debug("%s: %s", component, line)

        if output.returncode == 0:
            return success(output)

        message = f"'{command}' exited with code {output.returncode}"
        tail = output.stderr.strip().splitlines()[-_STDERR_TAIL_LINES:]
        if tail:
            message += "\n" + "\n".join(tail)
        return failure(BuildError(component, message))

    return action
