"""Syntax tree of the POSIX shell language."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


class RedirectMode(enum.Enum):
    """File redirection modes."""

    READ = enum.auto()
    WRITE = enum.auto()
    READ_APPEND = enum.auto()
    WRITE_APPEND = enum.auto()
    READ_DUP = enum.auto()
    WRITE_DUP = enum.auto()
    READ_WRITE = enum.auto()


@dataclass
class Redirect:
    """A file redirection, optionally on an explicit descriptor number."""

    file: str
    mode: RedirectMode
    n: Optional[int] = None


@dataclass
class Assign:
    """A variable assignment."""

    var: str
    val: str


class SeparatorOp(enum.Enum):
    """Separator character between commands."""

    AMP = "&"
    SEMI = ";"


class Command:
    """Base class of every command node."""


@dataclass
class SimpleCommand(Command):
    """A basic command such as ``ls -al``."""

    args: list[str] = field(default_factory=list)
    assigns: list[Assign] = field(default_factory=list)
    redirects: list[Redirect] = field(default_factory=list)


@dataclass
class Pipeline(Command):
    """Two commands joined by a pipe."""

    left: Command
    right: Command


@dataclass
class And(Command):
    """Run right only if left succeeds."""

    left: Command
    right: Command


@dataclass
class Or(Command):
    """Run right only if left fails."""

    left: Command
    right: Command


@dataclass
class Not(Command):
    """Negate the exit code of a command."""

    cmd: Command


@dataclass
class AsyncList(Command):
    """Run first in the background, then the rest."""

    first: Command
    rest: Optional[Command] = None


@dataclass
class SeqList(Command):
    """Run first to completion, then the rest."""

    first: Command
    rest: Optional[Command] = None


@dataclass
class Subshell(Command):
    """A command run in a subshell."""

    cmd: Command


@dataclass
class Exec(Command):
    """A command carrying an embedded action, as ``find`` does with ``-exec``."""

    base: Command
    action: Command
    terminator: str


@dataclass
class Condition:
    """A condition and the body run when it holds, for ``if`` and ``elif``."""

    cond: Command
    body: Command


@dataclass
class If(Command):
    """An ``if`` statement with its ``elif`` branches and optional ``else``."""

    conds: list[Condition] = field(default_factory=list)
    else_part: Optional[Command] = None


@dataclass
class While(Command):
    cond: Command
    body: Command


@dataclass
class Until(Command):
    cond: Command
    body: Command


@dataclass
class For(Command):
    name: str
    wordlist: list[str]
    body: Command


@dataclass
class CaseArm:
    """One match arm of a case statement."""

    pattern: list[str]
    body: Command


@dataclass
class Case(Command):
    word: str
    arms: list[CaseArm] = field(default_factory=list)


@dataclass
class FunctionDef(Command):
    fname: str
    body: Command


@dataclass
class NoOp(Command):
    """A command that does nothing."""