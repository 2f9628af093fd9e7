"""Resolution of command names to shell commands or executables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, NoReturn, Optional, Union

CommandHandler = Callable[[], None]


@dataclass(frozen=True)
class BinaryCommand:
    """A command found as a file on disk."""

    path: Path


@dataclass(frozen=True)
class CustomCommand:
    """A command handled by the shell itself."""

    name: str


CommandType = Union[BinaryCommand, CustomCommand]


def exit_handler() -> NoReturn:
    """Announce the exit and leave the process with status 0."""
    print("Exiting...")
    sys.exit(0)


def custom_commands() -> dict[str, CommandHandler]:
    """Commands the shell handles itself, by name."""
    return {"exit": exit_handler}


def _search(command: str, directory: Union[str, Path]) -> Optional[Path]:
    """Find a file or symlink named command directly inside directory."""
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                is_link = entry.is_symlink()
                if not (is_link or entry.is_file(follow_symlinks=False)):
                    continue
                if entry.name == command:
                    if is_link:
                        raise NotImplementedError("symlink not supported")
                    return Path(entry.path)
    except OSError:
        return None
    return None


def find_binary(command: str, path: str) -> CommandType:
    """Resolve a command: shell commands first, then the working directory, then path.

    path is a colon-separated list of directories. Raises FileNotFoundError if
    nothing matches and NotImplementedError if the match is a symlink.
    """
    if command in custom_commands():
        return CustomCommand(command)

    try:
        cwd: Optional[str] = os.getcwd()
    except OSError:
        cwd = None
    if cwd is not None:
        found = _search(command, cwd)
        if found is not None:
            return BinaryCommand(found)

    for entry in path.split(":"):
        found = _search(command, entry)
        if found is not None:
            return BinaryCommand(found)

    raise FileNotFoundError(f"command not found: {command}")