import os

import pytest

from tgsh.env import (
    Env,
    EnvError,
    EnvNotFoundError,
    InvalidKeyError,
    InvalidValueError,
)

NAME = "TGSH_TEST_VARIABLE"


@pytest.fixture
def saved_environ():
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)


def test_set_and_get(saved_environ):
    env = Env()
    env.set(NAME, "value")
    assert env.get(NAME) == "value"
    assert os.environ[NAME] == "value"


def test_set_overrides(saved_environ):
    env = Env()
    env.set(NAME, "first")
    env.set(NAME, "second")
    assert env.get(NAME) == "second"
    assert len(env) == 1


@pytest.mark.parametrize("key", ["", "A=B", "A\0B"])
def test_invalid_keys(saved_environ, key):
    env = Env()
    with pytest.raises(InvalidKeyError):
        env.set(key, "v")
    with pytest.raises(InvalidKeyError):
        env.remove(key)


def test_invalid_value(saved_environ):
    env = Env()
    with pytest.raises(InvalidValueError):
        env.set(NAME, "a\0b")
    assert NAME not in env


def test_get_missing_raises():
    with pytest.raises(EnvNotFoundError) as info:
        Env().get("TGSH_MISSING")
    assert isinstance(info.value, EnvError)
    assert "TGSH_MISSING" in str(info.value)


def test_remove(saved_environ):
    env = Env()
    env.set(NAME, "value")
    env.remove(NAME)
    assert NAME not in env
    assert NAME not in os.environ
    env.remove(NAME)
    assert len(env) == 0


def test_load_imports_process_environment(saved_environ):
    os.environ[NAME] = "loaded"
    env = Env()
    env.load()
    assert env.get(NAME) == "loaded"
    assert len(env) == len(os.environ)


def test_from_pairs_leaves_process_alone(saved_environ):
    os.environ.pop(NAME, None)
    env = Env.from_pairs([(NAME, "x"), ("OTHER_TGSH", "y")])
    assert dict(env.items()) == {NAME: "x", "OTHER_TGSH": "y"}
    assert NAME not in os.environ