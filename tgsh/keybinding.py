"""Keybinding system."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

BindingFn = Callable[[Any, Any, Any], None]


@dataclass(frozen=True)
class KeyCode:
    """A key on the keyboard; printable keys carry their character."""

    name: str
    char: Optional[str] = None


KeyCode.BACKSPACE = KeyCode("backspace")
KeyCode.DELETE = KeyCode("delete")
KeyCode.DOWN = KeyCode("down")
KeyCode.ESC = KeyCode("esc")
KeyCode.ENTER = KeyCode("enter")
KeyCode.LEFT = KeyCode("left")
KeyCode.RIGHT = KeyCode("right")
KeyCode.TAB = KeyCode("tab")
KeyCode.UP = KeyCode("up")


def _char_key(c: str) -> KeyCode:
    return KeyCode("char", c)


class KeyModifiers(enum.Flag):
    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    META = 32


Binding = tuple[KeyCode, KeyModifiers]


@dataclass(frozen=True)
class KeyEvent:
    """A key press together with the modifiers held."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE


class BindingParseError(ValueError):
    """A keybinding string could not be parsed."""


class UnknownKeyError(BindingParseError):
    def __init__(self, key: str) -> None:
        super().__init__(f"unknown key: {key}")
        self.key = key


class UnknownModError(BindingParseError):
    def __init__(self, modifier: str) -> None:
        super().__init__(f"unknown modifier: {modifier}")
        self.modifier = modifier


class EmptyKeybindingError(BindingParseError):
    def __init__(self) -> None:
        super().__init__("empty keybinding")


_SPECIAL_KEYS = {
    "<space>": _char_key(" "),
    "<backspace>": KeyCode.BACKSPACE,
    "<delete>": KeyCode.DELETE,
    "<down>": KeyCode.DOWN,
    "<esc>": KeyCode.ESC,
    "<enter>": KeyCode.ENTER,
    "<left>": KeyCode.LEFT,
    "<right>": KeyCode.RIGHT,
    "<tab>": KeyCode.TAB,
    "<up>": KeyCode.UP,
}

_MODIFIERS = {
    "s": KeyModifiers.SHIFT,
    "shift": KeyModifiers.SHIFT,
    "a": KeyModifiers.ALT,
    "alt": KeyModifiers.ALT,
    "c": KeyModifiers.CONTROL,
    "ctrl": KeyModifiers.CONTROL,
    "super": KeyModifiers.SUPER,
    "m": KeyModifiers.META,
    "meta": KeyModifiers.META,
}


def _parse_keycode(s: str) -> KeyCode:
    if len(s) == 1 and "!" <= s <= "~":
        return _char_key(s)
    try:
        return _SPECIAL_KEYS[s]
    except KeyError:
        raise UnknownKeyError(s) from None


def _ascii_lower(s: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in s)


def _parse_modifier(s: str) -> KeyModifiers:
    try:
        return _MODIFIERS[_ascii_lower(s)]
    except KeyError:
        raise UnknownModError(s) from None


def parse_keybinding(s: str) -> Binding:
    """Parse a string such as ``C-S-c`` into a key code and modifiers."""
    *mod_parts, key_part = s.split("-")
    code = _parse_keycode(key_part)
    mods = KeyModifiers.NONE
    for part in mod_parts:
        mods |= _parse_modifier(part)
    return code, mods


class Keybinding(ABC):
    """Interface for a keybinding system."""

    @abstractmethod
    def handle_key_event(self, sh: Any, ctx: Any, rt: Any, key_event: KeyEvent) -> bool:
        """Run matching bindings; True means the event was handled."""

    @abstractmethod
    def get_info(self) -> dict[str, str]:
        """Descriptions of the bindings, keyed by binding string."""


class DefaultKeybinding(Keybinding):
    """Keybindings held in a mapping from binding to callback."""

    def __init__(
        self,
        bindings: Optional[dict[Binding, BindingFn]] = None,
        info: Optional[dict[str, str]] = None,
    ) -> None:
        self.bindings: dict[Binding, BindingFn] = dict(bindings or {})
        self.info: dict[str, str] = dict(info or {})

    @classmethod
    def from_entries(
        cls, entries: Iterable[tuple[Binding, BindingFn, str, str]]
    ) -> DefaultKeybinding:
        """Build from (binding, callback, binding string, description) entries."""
        keybinding = cls()
        for binding, func, name, desc in entries:
            keybinding.bindings[binding] = func
            keybinding.info[name] = desc
        return keybinding

    def handle_key_event(self, sh: Any, ctx: Any, rt: Any, key_event: KeyEvent) -> bool:
        func = self.bindings.get((key_event.code, key_event.modifiers))
        if func is None:
            return False
        func(sh, ctx, rt)
        return True

    def get_info(self) -> dict[str, str]:
        return self.info