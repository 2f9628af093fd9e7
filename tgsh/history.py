"""Shell history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union


class History(ABC):
    """Interface for shell history; index 0 is the most recent entry."""

    @abstractmethod
    def add(self, item: str) -> None: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def get(self, i: int) -> Optional[str]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def is_empty(self) -> bool:
        return len(self) == 0


def _lookup(items: list[str], i: int) -> Optional[str]:
    return items[i] if 0 <= i < len(items) else None


class DefaultHistory(History):
    """History kept in process memory."""

    def __init__(self) -> None:
        self._hist: list[str] = []

    def add(self, item: str) -> None:
        self._hist.insert(0, item)

    def clear(self) -> None:
        self._hist.clear()

    def get(self, i: int) -> Optional[str]:
        return _lookup(self._hist, i)

    def __len__(self) -> int:
        return len(self._hist)


class HistoryFileError(Exception):
    """Raised when the history file cannot be opened or written."""


def _read_history_file(path: Path) -> list[str]:
    try:
        with path.open("a+b") as handle:
            handle.seek(0)
            data = handle.read()
    except OSError as exc:
        raise HistoryFileError(f"error when opening history file {exc}") from exc
    parts = data.split(b"\n")
    if parts and parts[-1] == b"":
        parts.pop()
    lines = []
    for raw in parts:
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            break
    return lines


class FileBackedHistory(History):
    """History stored one entry per line in a file, newest first."""

    def __init__(self, hist_file: Union[str, Path]) -> None:
        self.hist_file = Path(hist_file)
        self._hist = _read_history_file(self.hist_file)

    def _dedup(self) -> None:
        self._hist = list(dict.fromkeys(self._hist))

    def _flush(self) -> None:
        self._dedup()
        try:
            handle = self.hist_file.open("r+b")
        except OSError as exc:
            raise HistoryFileError(f"error when opening history file {exc}") from exc
        try:
            with handle:
                handle.write("\n".join(self._hist).encode("utf-8"))
                handle.truncate()
        except OSError as exc:
            raise HistoryFileError(f"error writing history to disk {exc}") from exc

    def add(self, item: str) -> None:
        self._hist.insert(0, item)
        self._flush()

    def clear(self) -> None:
        self._hist.clear()
        self._flush()

    def get(self, i: int) -> Optional[str]:
        return _lookup(self._hist, i)

    def __len__(self) -> int:
        return len(self._hist)