import logging
import sys

import pytest

from pilang.cli import main


def test_runs_program(workdir, capsys):
    (workdir / "hello.pi").write_text("[print [list 104 105]] [newline] [echo [add 1 2]]")
    assert main(["hello.pi"]) == 0
    assert capsys.readouterr().out == "hi\n3\n"


def test_error_is_printed_and_exit_status_is_zero(workdir, capsys):
    (workdir / "bad.pi").write_text("[echo 1]\n[echo x]\n")
    assert main(["bad.pi"]) == 0
    assert capsys.readouterr().out == "1\nError undefined identifier: x, line: 1\n"


def test_strict_exit_status(workdir, capsys):
    (workdir / "bad.pi").write_text("[div 1 0]")
    assert main(["--strict", "bad.pi"]) == 1
    assert capsys.readouterr().out == "Error integer divide by zero, line: 0\n"


def test_missing_file(workdir, capsys):
    assert main(["absent.pi"]) == 0
    assert capsys.readouterr().out.startswith("Error cannot read absent.pi")


def test_lex_error(workdir, capsys):
    (workdir / "lex.pi").write_text("[echo 1] {")
    assert main(["lex.pi"]) == 0
    assert capsys.readouterr().out == "Error unexpected character: {\n"


def test_verbose_configures_logging(workdir, capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    (workdir / "ok.pi").write_text("[echo 1]")
    assert main(["-v", "ok.pi"]) == 0
    assert capsys.readouterr().out == "1\n"
    assert calls and calls[0]["level"] == logging.DEBUG


def test_quiet_by_default(workdir, capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    (workdir / "ok.pi").write_text("[echo 1]")
    assert main(["ok.pi"]) == 0
    assert calls == []


def test_requires_a_file_argument(capsys):
    with pytest.raises(SystemExit):
        main([])


def test_recursion_limit_is_raised(workdir, capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(sys, "setrecursionlimit", calls.append)
    monkeypatch.setenv("PILANG_RECURSION_LIMIT", str(sys.getrecursionlimit() + 500))
    (workdir / "ok.pi").write_text("[echo 1]")
    assert main(["ok.pi"]) == 0
    assert calls == [sys.getrecursionlimit() + 500]


def test_recursion_limit_is_never_lowered(workdir, capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(sys, "setrecursionlimit", calls.append)
    monkeypatch.setenv("PILANG_RECURSION_LIMIT", "100")
    (workdir / "ok.pi").write_text("[echo 1]")
    assert main(["ok.pi"]) == 0
    assert calls == []
