"""Terminal colours, gradients and styled text."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

RESET = "\x1b[0m"
_FOREGROUND_RESET = "\x1b[39m"

# Index into the 16-colour ANSI palette for each named colour.
_NAMED_INDEX = {
    "black": 0,
    "dark_red": 1,
    "dark_green": 2,
    "dark_yellow": 3,
    "dark_blue": 4,
    "dark_magenta": 5,
    "dark_cyan": 6,
    "grey": 7,
    "dark_grey": 8,
    "red": 9,
    "green": 10,
    "yellow": 11,
    "blue": 12,
    "magenta": 13,
    "cyan": 14,
    "white": 15,
}


@dataclass(frozen=True)
class Color:
    """A terminal colour: either a true-colour RGB value or a named palette colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.name is not None:
            if self.name not in _NAMED_INDEX:
                raise ValueError(f"unknown colour name: {self.name!r}")
            return
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")

    @property
    def is_rgb(self) -> bool:
        return self.name is None

    def ansi_foreground(self) -> str:
        """Escape sequence that switches the foreground to this colour."""
        if self.is_rgb:
            return f"\x1b[38;2;{self.r};{self.g};{self.b}m"
        return f"\x1b[38;5;{_NAMED_INDEX[self.name]}m"


Color.BLACK = Color(name="black")
Color.DARK_GREY = Color(name="dark_grey")
Color.RED = Color(name="red")
Color.DARK_RED = Color(name="dark_red")
Color.GREEN = Color(name="green")
Color.DARK_GREEN = Color(name="dark_green")
Color.YELLOW = Color(name="yellow")
Color.DARK_YELLOW = Color(name="dark_yellow")
Color.BLUE = Color(name="blue")
Color.DARK_BLUE = Color(name="dark_blue")
Color.MAGENTA = Color(name="magenta")
Color.DARK_MAGENTA = Color(name="dark_magenta")
Color.CYAN = Color(name="cyan")
Color.DARK_CYAN = Color(name="dark_cyan")
Color.WHITE = Color(name="white")
Color.GREY = Color(name="grey")

# Custom palette used by the prompt and loader.
PURPLE = Color(122, 114, 229)
DARK_BLUE = Color(20, 94, 152)
DARK_PINK = Color(171, 87, 151)
DARK_WHITE = Color(218, 208, 192)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)
ORANGE = Color(255, 165, 0)


@dataclass(frozen=True)
class StyledText:
    """Text paired with a foreground colour."""

    text: str
    color: Color

    def __str__(self) -> str:
        return f"{self.color.ansi_foreground()}{self.text}{_FOREGROUND_RESET}"


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def display_gradient_text(text: str, start_color: Color, end_color: Color) -> None:
    """Print text to stdout, blending the colour line by line."""
    lines = _lines(text)
    out = sys.stdout
    for i, line in enumerate(lines):
        blended = blend_color(start_color, end_color, i / len(lines))
        out.write(blended.ansi_foreground())
        out.write(f"{line}\n")
        out.write(RESET)
    out.flush()


def display_color_text(text: str, color: Color) -> None:
    """Print one line of text to stdout in the given colour."""
    out = sys.stdout
    out.write(color.ansi_foreground())
    out.write(f"{text}\n")
    out.write(RESET)
    out.flush()


def return_color_text(text: str, color: Color) -> StyledText:
    """Wrap text with a colour without printing it."""
    return StyledText(str(text), color)


def blend_color(start: Color, end: Color, ratio: float) -> Color:
    """Linear blend of two RGB colours; any named colour yields white."""
    if start.is_rgb and end.is_rgb:
        return Color(
            _blend_value(start.r, end.r, ratio),
            _blend_value(start.g, end.g, ratio),
            _blend_value(start.b, end.b, ratio),
        )
    return Color.WHITE


def _blend_value(start: int, end: int, ratio: float) -> int:
    value = start * (1.0 - ratio) + end * ratio
    if value != value:  # NaN saturates to zero
        return 0
    return int(max(0.0, min(255.0, value)))