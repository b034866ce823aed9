import pytest

from egg.builtin.env_builtin import register
from egg.interpreter import Interpreter
from egg.types.scope import Scope


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    # A developer's prelude or pretty-printer settings must not leak into tests.
    for var in (
        "EGG_PRELUDE_PATH",
        "EGG_PPRINT_OPTIONS",
        "EGG_REPL_HOST",
        "EGG_REPL_PORT",
        "EGG_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def top():
    """Top scope with the builtin library registered."""
    scope = Scope()
    register(scope)
    return scope


@pytest.fixture
def scope(top):
    """A program scope: fresh child of the top scope."""
    return Scope(parent=top)


@pytest.fixture
def interp():
    return Interpreter(prelude=None)


@pytest.fixture
def run(interp):
    """Parse and evaluate one program in a fresh scope."""
    return interp.run
