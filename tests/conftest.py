import pytest

from pilang.interpreter import Interpreter
from pilang.types.environment import Environment


# Most tests run small programs through a fresh Interpreter. `run` evaluates
# source text and returns the value of the last top-level form; `number`
# additionally unwraps a numeric result.


@pytest.fixture
def env():
    """Fresh, empty environment."""
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    def _run(source: str):
        return interp.eval(source)
    return _run


@pytest.fixture
def number(run):
    def _number(source: str) -> int:
        value = run(source)
        assert value is not None and value.is_number, f"expected a number from {source!r}, got {value!r}"
        return value.number
    return _number


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Temporary working directory for programs and importable modules."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PILANG_PATH", raising=False)
    return tmp_path
