"""Colour theme shared by the shell."""

from __future__ import annotations

from dataclasses import dataclass

from tgsh.colors import Color


@dataclass
class Theme:
    """Common colour values bundled together."""

    out_color: Color = Color.WHITE
    err_color: Color = Color.RED
    selection_color: Color = Color.WHITE
    black: Color = Color.BLACK
    dark_grey: Color = Color.DARK_GREY
    red: Color = Color.RED
    dark_red: Color = Color.DARK_RED
    green: Color = Color.GREEN
    dark_green: Color = Color.DARK_GREEN
    yellow: Color = Color.YELLOW
    dark_yellow: Color = Color.DARK_YELLOW
    blue: Color = Color.BLUE
    dark_blue: Color = Color.DARK_BLUE
    magenta: Color = Color.MAGENTA
    dark_magenta: Color = Color.DARK_MAGENTA
    cyan: Color = Color.CYAN
    dark_cyan: Color = Color.DARK_CYAN
    white: Color = Color.WHITE
    light_grey: Color = Color.GREY