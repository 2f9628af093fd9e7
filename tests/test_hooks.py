from pathlib import Path

import pytest

from tgsh.hooks import (
    ChangeDirCtx,
    CommandNotFoundCtx,
    Hooks,
    JobExitCtx,
    StartupCtx,
)


def test_hooks_run_in_order():
    calls = []
    hooks = Hooks()
    hooks.insert(CommandNotFoundCtx, lambda sh, c, r, ctx: calls.append("first"))
    hooks.insert(CommandNotFoundCtx, lambda sh, c, r, ctx: calls.append("second"))
    hooks.run(None, None, None, CommandNotFoundCtx())
    assert calls == ["first", "second"]


def test_hook_receives_arguments():
    seen = []
    hooks = Hooks()
    hooks.insert(ChangeDirCtx, lambda sh, c, r, ctx: seen.append((sh, c, r, ctx)))
    event = ChangeDirCtx(Path("/a"), Path("/b"))
    hooks.run("sh", "ctx", "rt", event)
    assert seen == [("sh", "ctx", "rt", event)]


def test_only_matching_type_runs():
    calls = []
    hooks = Hooks()
    hooks.insert(ChangeDirCtx, lambda *a: calls.append("cd"))
    hooks.run(None, None, None, CommandNotFoundCtx())
    assert calls == []


def test_error_stops_remaining_hooks():
    calls = []

    def failing(*args):
        raise RuntimeError("boom")

    hooks = Hooks()
    hooks.insert(CommandNotFoundCtx, failing)
    hooks.insert(CommandNotFoundCtx, lambda *a: calls.append("after"))
    with pytest.raises(RuntimeError):
        hooks.run(None, None, None, CommandNotFoundCtx())
    assert calls == []


def test_default_startup_hook(capsys):
    Hooks.with_defaults().run(None, None, None, StartupCtx(0.1))
    assert capsys.readouterr().out == "welcome to tgs!\n"


def test_empty_hooks_print_nothing(capsys):
    Hooks().run(None, None, None, StartupCtx(0.1))
    assert capsys.readouterr().out == ""


def test_default_job_exit_hook(capsys):
    Hooks.with_defaults().run(None, None, None, JobExitCtx(0))
    assert capsys.readouterr().out.startswith("[exit +")