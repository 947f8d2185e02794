from dataclasses import dataclass


@dataclass(frozen=True)
class CommandOutput:
    command: str
    returncode: int
    stdout: str
    stderr: str
