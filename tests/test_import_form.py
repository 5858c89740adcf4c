import pytest

from pilang.errors import PiArithmeticError, PiFileError, PiFormError, PiParseError, PiUndefinedIdentifier
from pilang.modules.loader import load_file, resolve_module, run_file
from pilang.types.environment import Environment
from pilang.types.identifier import Identifier


def test_import_makes_bindings_visible(workdir, interp, capsys):
    (workdir / "greeting.pi").write_text("[set greet 1]")
    interp.eval("[import greeting] [echo greet]")
    assert capsys.readouterr().out == "1\n"


def test_import_shares_the_importers_namespace(workdir, interp):
    # the module reads `base` from the importer and defines a function over it
    (workdir / "lib.pi").write_text("[set offset [add base 1]]\n[set shift [func [x] [add x offset]]]\n")
    interp.eval("[set base 10] [import lib]")
    assert interp.eval("[call shift 5]").number == 16


def test_import_overwrites_existing_bindings(workdir, interp):
    (workdir / "clobber.pi").write_text("[set x 2]")
    interp.eval("[set x 1] [import clobber]")
    assert interp.env.lookup("x").number == 2


def test_import_yields_no_value(workdir, run):
    (workdir / "empty_ish.pi").write_text("[set unused 0]")
    assert run("[import empty_ish]") is None


def test_nested_imports(workdir, number):
    (workdir / "inner.pi").write_text("[set depth 2]")
    (workdir / "outer.pi").write_text("[import inner] [set depth [add depth 1]]")
    assert number("[import outer] [add depth 0]") == 3


def test_reimport_runs_the_module_again(workdir, interp, capsys):
    (workdir / "noisy.pi").write_text("[echo 9]")
    interp.eval("[import noisy] [import noisy]")
    assert capsys.readouterr().out == "9\n9\n"


def test_missing_module(workdir, run):
    with pytest.raises(PiFileError, match="nowhere"):
        run("[import nowhere]")


def test_import_requires_a_name(workdir, run):
    with pytest.raises(PiFormError):
        run("[import [list 1]]")


def test_errors_in_imported_file_report_its_own_line(workdir, run):
    (workdir / "broken.pi").write_text("[set a 1]\n[echo b]\n")
    with pytest.raises(PiUndefinedIdentifier) as excinfo:
        run("[set z 0] [set y 0] [import broken]")
    assert excinfo.value.line == 1


def test_parse_errors_in_imported_file(workdir, run):
    (workdir / "unbalanced.pi").write_text("[set a 1")
    with pytest.raises(PiParseError):
        run("[import unbalanced]")


def test_module_search_path(workdir, tmp_path_factory, monkeypatch, number):
    libdir = tmp_path_factory.mktemp("lib")
    (libdir / "far.pi").write_text("[set far 5]")
    monkeypatch.setenv("PILANG_PATH", str(libdir))
    assert number("[import far] [add far 0]") == 5


def test_working_directory_wins_over_search_path(workdir, tmp_path_factory, monkeypatch):
    libdir = tmp_path_factory.mktemp("lib")
    (libdir / "dup.pi").write_text("[set which 2]")
    (workdir / "dup.pi").write_text("[set which 1]")
    monkeypatch.setenv("PILANG_PATH", str(libdir))
    assert resolve_module("dup").resolve() == (workdir / "dup.pi").resolve()


# ------------------ loader ------------------

def test_load_file(workdir):
    path = workdir / "prog.pi"
    path.write_text("[set x 1]\n[echo x]\n")
    assert load_file(path) == [
        [Identifier("set"), Identifier("x"), 1],
        [Identifier("echo"), Identifier("x")],
    ]


def test_run_file_returns_the_same_environment(workdir, capsys):
    path = workdir / "prog.pi"
    path.write_text("[set x 1]\n[set y [add x 1]]\n[echo y]\n")
    env = Environment()
    assert run_file(path, env) is env
    assert env.lookup("y").number == 2
    assert capsys.readouterr().out == "2\n"


def test_run_file_missing(workdir):
    with pytest.raises(PiFileError):
        run_file(workdir / "absent.pi", Environment())


def test_run_file_stops_at_first_error(workdir, capsys):
    path = workdir / "prog.pi"
    path.write_text("[echo 1]\n[set a 1]\n[div a 0]\n[echo 2]\n")
    env = Environment()
    with pytest.raises(PiArithmeticError) as excinfo:
        run_file(path, env)
    assert excinfo.value.line == 2
    assert env.lookup("a").number == 1
    assert capsys.readouterr().out == "1\n"


def test_interpreter_run_file(workdir, interp, capsys):
    (workdir / "helper.pi").write_text("[set twice [func [x] [mul x 2]]]")
    (workdir / "main.pi").write_text("[import helper]\n[echo [call twice 21]]\n")
    assert interp.run_file(workdir / "main.pi") is interp.env
    assert capsys.readouterr().out == "42\n"
