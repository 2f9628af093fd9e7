"""Utility functions for building a prompt."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path


def full_pwd() -> str:
    """The full working directory."""
    return os.getcwd()


def top_pwd() -> str:
    """The last component of the working directory, ``~`` at home, ``/`` at root."""
    cur = Path.cwd()
    if cur == Path.home().resolve():
        return "~"
    if cur == Path("/"):
        return "/"
    return cur.name


def _command_line(program: str) -> str:
    out = subprocess.run([program], capture_output=True, check=False).stdout
    text = out.decode("utf-8")
    if not text.endswith("\n"):
        raise ValueError(f"unexpected output from {program}: {text!r}")
    return text[:-1]


def username() -> str:
    """The name of the current user."""
    return _command_line("whoami")


def hostname() -> str:
    """The host name of this machine."""
    return _command_line("hostname")