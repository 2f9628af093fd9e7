"""Animated loading indicator."""

from __future__ import annotations

import json
import sys
import threading
import time
from typing import Optional, TextIO

from tgsh.colors import DARK_WHITE, Color

_TICKS = ("🤘 ", "🤟 ", "🖖 ", "✋ ", "🤚 ", "👆 ", "👌")
_TICK_INTERVAL = 0.12
_CLEAR_LINE = "\r\x1b[2K"
_FINISH_MESSAGE = "Found something..."


def color_to_ansi(color: Color) -> str:
    """True-colour escape for an RGB colour; empty for named colours."""
    if color.is_rgb:
        return f"\x1b[38;2;{color.r};{color.g};{color.b}m"
    return ""


class LoadingIndicator:
    """A spinner shown while a script is being generated."""

    def __init__(
        self,
        color: Color = DARK_WHITE,
        duration: float = 5.0,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.color = color
        self.duration = duration
        self._stream = stream
        self._running = False
        self._stop = threading.Event()

    def _draw(self, prefix: str, tick: str, message: str) -> None:
        stream = self._stream or sys.stderr
        stream.write(f"{_CLEAR_LINE}{prefix}{tick} {message}")
        stream.flush()

    def start(self, prompt: str) -> None:
        """Animate the spinner for the set duration or until stop() is called."""
        prefix = color_to_ansi(self.color)
        message = f"Generating script for: {json.dumps(prompt, ensure_ascii=False)}"
        frames = _TICKS[:-1]
        self._stop.clear()
        self._running = True
        try:
            deadline = time.monotonic() + self.duration
            frame = 0
            while True:
                self._draw(prefix, frames[frame % len(frames)], message)
                frame += 1
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                if self._stop.wait(min(_TICK_INTERVAL, remaining)):
                    break
            self._draw(prefix, _TICKS[-1], _FINISH_MESSAGE)
            (self._stream or sys.stderr).write("\n")
            (self._stream or sys.stderr).flush()
        finally:
            self._running = False

    def stop(self) -> None:
        """Stop a running animation."""
        self._running = False
        self._stop.set()

    def is_running(self) -> bool:
        return self._running