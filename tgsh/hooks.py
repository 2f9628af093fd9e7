"""Shell runtime hooks called on shell events."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from tgsh.cmd_output import CmdOutput

Hook = Callable[[Any, Any, Any, Any], None]


@dataclass
class StartupCtx:
    """Runs when the shell starts; startup_time is in seconds."""

    startup_time: float


@dataclass
class BeforeCommandCtx:
    """Runs before a command is executed."""

    raw_command: str
    command: str
    run_ctx: Any


@dataclass
class AfterCommandCtx:
    """Runs after a command is executed."""

    command: str
    cmd_output: CmdOutput


@dataclass
class CommandNotFoundCtx:
    """Runs when a command is not found."""


@dataclass
class ChangeDirCtx:
    """Runs when the working directory changes."""

    old_dir: Path
    new_dir: Path


@dataclass
class JobExitCtx:
    """Runs when a job completes; status is None if there is no exit code."""

    status: Optional[int]


def _expect(ctx: Any, kind: type) -> None:
    """Raise TypeError when a hook is handed a context of the wrong kind."""
    if not isinstance(ctx, kind):
        raise TypeError(f"expected {kind.__name__}, got {type(ctx).__name__}")


def startup_hook(sh: Any, sh_ctx: Any, sh_rt: Any, ctx: StartupCtx) -> None:
    """Greet the user when the shell starts."""
    _expect(ctx, StartupCtx)
    print("welcome to tgs!")


def before_command_hook(sh: Any, sh_ctx: Any, sh_rt: Any, ctx: BeforeCommandCtx) -> None:
    """Default before-command hook: checks the context and leaves the command as is."""
    _expect(ctx, BeforeCommandCtx)


def after_command_hook(sh: Any, sh_ctx: Any, sh_rt: Any, ctx: AfterCommandCtx) -> None:
    """Default after-command hook: checks the context and reports nothing."""
    _expect(ctx, AfterCommandCtx)


def change_dir_hook(sh: Any, sh_ctx: Any, sh_rt: Any, ctx: ChangeDirCtx) -> None:
    """Default change-directory hook: checks the context and reports nothing."""
    _expect(ctx, ChangeDirCtx)


def job_exit_hook(sh: Any, sh_ctx: Any, sh_rt: Any, ctx: JobExitCtx) -> None:
    """Report the exit status of a finished job."""
    print(f"[exit +{ctx.status}]")


class Hooks:
    """Hooks registered per context type."""

    def __init__(self) -> None:
        self._hooks: dict[type, list[Hook]] = {}

    @classmethod
    def with_defaults(cls) -> Hooks:
        hooks = cls()
        hooks.insert(StartupCtx, startup_hook)
        hooks.insert(BeforeCommandCtx, before_command_hook)
        hooks.insert(AfterCommandCtx, after_command_hook)
        hooks.insert(ChangeDirCtx, change_dir_hook)
        hooks.insert(JobExitCtx, job_exit_hook)
        return hooks

    def insert(self, ctx_type: type, hook: Hook) -> None:
        """Register a hook for events of the given context type."""
        self._hooks.setdefault(ctx_type, []).append(hook)

    def run(self, sh: Any, sh_ctx: Any, sh_rt: Any, ctx: Any) -> None:
        """Run every hook registered for the type of ctx, stopping at the first error."""
        for hook in list(self._hooks.get(type(ctx), [])):
            hook(sh, sh_ctx, sh_rt, ctx)