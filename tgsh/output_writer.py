"""Coloured output that can also be collected."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from tgsh.colors import Color, StyledText


class OutputWriter:
    """Writes coloured text to stdout and stderr, optionally recording it."""

    def __init__(
        self,
        out_color: Color = Color.WHITE,
        err_color: Color = Color.RED,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.out_color = out_color
        self.err_color = err_color
        self._stdout = stdout
        self._stderr = stderr
        self._collecting = False
        self._out: list[str] = []
        self._err: list[str] = []

    @property
    def collecting(self) -> bool:
        return self._collecting

    def begin_collecting(self) -> None:
        self._collecting = True

    @staticmethod
    def _emit(stream: TextIO, text: str, color: Color) -> None:
        stream.write(str(StyledText(text, color)))
        stream.flush()

    def eprint(self, s: object) -> None:
        text = str(s)
        if self._collecting:
            self._err.append(text)
        self._emit(self._stderr or sys.stderr, text, self.err_color)

    def eprintln(self, s: object) -> None:
        self.eprint(s)
        self.eprint("\r\n")

    def print(self, s: object) -> None:
        text = str(s)
        if self._collecting:
            self._out.append(text)
        self._emit(self._stdout or sys.stdout, text, self.out_color)

    def println(self, s: object) -> None:
        self.print(s)
        self.print("\r\n")

    def end_collecting(self) -> tuple[str, str]:
        """Stop collecting and return and clear (stdout, stderr) text."""
        self._collecting = False
        out, err = "".join(self._out), "".join(self._err)
        self._out.clear()
        self._err.clear()
        return out, err