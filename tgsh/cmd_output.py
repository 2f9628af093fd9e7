"""Result of running a command."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CmdOutput:
    """Exit status together with any captured output."""

    status: int
    stdout: str = ""
    stderr: str = ""

    @classmethod
    def success(cls) -> CmdOutput:
        return cls(0)

    @classmethod
    def error(cls) -> CmdOutput:
        return cls(1)

    @classmethod
    def error_with_status(cls, status: int) -> CmdOutput:
        return cls(status)

    def set_output(self, out: str, err: str) -> None:
        self.stdout = out
        self.stderr = err