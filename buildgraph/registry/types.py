from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union

from buildgraph.result import Result

ActionReturn = Union[Result[Any], Any, None]
Action = Callable[[], Union[Awaitable[ActionReturn], ActionReturn]]


# eq=False keeps hashing by identity: a re-registered name is a different task.
@dataclass(frozen=True, eq=False)
class Task:
    name: str
    deps: tuple[str, ...] = ()
    action: Action | None = None
