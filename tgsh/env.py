"""Environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


class EnvError(Exception):
    """Base error for environment variable operations."""


class InvalidKeyError(EnvError, ValueError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Malformed key: {key}")
        self.key = key


class InvalidValueError(EnvError, ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Malformed value: {value}")
        self.value = value


class EnvNotFoundError(EnvError, LookupError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Key not found: {key}")
        self.key = key


@dataclass
class EnvModifiedCtx:
    """Describes a change to an environment variable; None means unset."""

    var: str
    new_val: Optional[str]
    old_val: Optional[str]


def _bad_key(var: str) -> bool:
    return not var or "=" in var or "\0" in var


def _bad_value(val: str) -> bool:
    return "\0" in val


class Env:
    """Set and query environment variables, mirrored into the process environment."""

    def __init__(self) -> None:
        self._table: dict[str, str] = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[object, object]]) -> Env:
        """Build a table from pairs without touching the process environment."""
        env = cls()
        env._table = {str(k): str(v) for k, v in pairs}
        return env

    def load(self) -> None:
        """Import every variable of the current process environment."""
        for var, val in list(os.environ.items()):
            self.set(var, val)

    def get(self, var: str) -> str:
        try:
            return self._table[var]
        except KeyError:
            raise EnvNotFoundError(var) from None

    def set(self, var: str, val: str) -> None:
        """Set a variable, overriding any previous value."""
        if _bad_key(var):
            raise InvalidKeyError(var)
        if _bad_value(val):
            raise InvalidValueError(val)
        os.environ[var] = val
        self._table[var] = val

    def remove(self, var: str) -> None:
        """Unset a variable; unsetting a missing one does nothing."""
        if _bad_key(var):
            raise InvalidKeyError(var)
        os.environ.pop(var, None)
        self._table.pop(var, None)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._table.items()))

    def __contains__(self, var: object) -> bool:
        return var in self._table

    def __len__(self) -> int:
        return len(self._table)