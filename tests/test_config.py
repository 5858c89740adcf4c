import io
import os
import sys

import pytest

from pilang.config import MODULE_SUFFIX, get_module_roots, get_recursion_limit
from pilang.runtime_context import get_output, redirect_output


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, 10000),
        ("", 10000),
        ("25000", 25000),
        ("5", 100),
        ("abc", 10000),
    ]
)
def test_recursion_limit(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("PILANG_RECURSION_LIMIT", raising=False)
    else:
        monkeypatch.setenv("PILANG_RECURSION_LIMIT", raw)
    assert get_recursion_limit() == expected


def test_module_roots_start_with_working_directory(workdir, tmp_path_factory, monkeypatch):
    a = tmp_path_factory.mktemp("a")
    b = tmp_path_factory.mktemp("b")
    monkeypatch.setenv("PILANG_PATH", f"{a}{os.pathsep}{b}")
    roots = get_module_roots()
    assert roots[0].resolve() == workdir.resolve()
    assert roots[1:] == [a, b]


def test_module_roots_without_search_path(workdir):
    assert [r.resolve() for r in get_module_roots()] == [workdir.resolve()]


def test_module_suffix():
    assert MODULE_SUFFIX == ".pi"


def test_output_defaults_to_live_stdout(capsys):
    assert get_output() is sys.stdout


def test_redirect_output_restores_previous_stream():
    outer, inner = io.StringIO(), io.StringIO()
    with redirect_output(outer):
        assert get_output() is outer
        with redirect_output(inner):
            assert get_output() is inner
        assert get_output() is outer
    assert get_output() is sys.stdout


def test_redirect_output_none_is_a_no_op():
    with redirect_output(None):
        assert get_output() is sys.stdout


def test_redirect_output_restores_after_error():
    buffer = io.StringIO()
    with pytest.raises(RuntimeError):
        with redirect_output(buffer):
            raise RuntimeError("boom")
    assert get_output() is sys.stdout
