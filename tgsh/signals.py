"""Interrupt signal tracking."""

from __future__ import annotations

import signal
from types import FrameType
from typing import Optional


class Signals:
    """Records whether SIGINT has been received."""

    def __init__(self) -> None:
        self._int = False
        signal.signal(signal.SIGINT, self._on_interrupt)

    def _on_interrupt(self, signum: int, frame: Optional[FrameType]) -> None:
        self._int = True

    def interrupted(self) -> bool:
        return self._int

    def clear(self) -> None:
        self._int = False