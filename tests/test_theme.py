from tgsh.colors import PURPLE, Color
from tgsh.theme import Theme


def test_default_output_colours():
    theme = Theme()
    assert theme.out_color == Color.WHITE
    assert theme.err_color == Color.RED
    assert theme.selection_color == Color.WHITE


def test_default_palette():
    theme = Theme()
    assert theme.light_grey == Color.GREY
    assert theme.dark_cyan == Color.DARK_CYAN
    assert theme.black == Color.BLACK


def test_override_keeps_other_defaults():
    theme = Theme(out_color=PURPLE)
    assert theme.out_color == PURPLE
    assert theme.err_color == Color.RED