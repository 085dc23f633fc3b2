import io
import sys

from kappa.cli import main


def test_command_prints_each_form(capsys):
    status = main(["-c", "(if 1 2 3) (if 1) [quote (a b)]"])
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "(if 1 2 3)",
        "error: if: expected 3, got 1",
        "(quote (a b))",
    ]
    assert status == 1


def test_clean_input_exits_zero(capsys):
    assert main(["-c", "(cond (a b) (else c))"]) == 0
    assert capsys.readouterr().out == "(cond (a b) (else c))\n"


def test_repr_output(capsys):
    main(["-c", "(quote x)", "--repr"])
    assert capsys.readouterr().out.strip() == "Quote(datum=Symbol('x'))"


def test_stdin_is_read_line_by_line(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("(begin 1\n2)\n#t\n"))
    status = main([])
    assert capsys.readouterr().out.splitlines() == [
        "error: unexpected EOF",
        "2",
        "error: unmatched right parenthesis",
        "#t",
    ]
    assert status == 1


def test_whole_file(tmp_path, capsys):
    path = tmp_path / "prog.scm"
    path.write_text("(begin 1\n 2)\n(unless #f\n x)\n", encoding="utf-8")
    assert main(["--whole", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["(begin 1 2)", "(unless #f x)"]


def test_lexer_flag(capsys):
    assert main(["--lexer", "regex", "-c", '"a\\tb"']) == 0
    assert capsys.readouterr().out == '"a\\tb"\n'


def test_lex_errors_are_reported_not_raised(capsys):
    assert main(["-c", '(a "\\q")']) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "error: lexer error: invalid escape sequence '\\\\q' in string"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.scm")]) == 1
    assert "Error reading" in capsys.readouterr().err


def test_bad_environment(monkeypatch, capsys):
    monkeypatch.setenv("KAPPA_LEXER", "bogus")
    assert main(["-c", "1"]) == 2
    assert "KAPPA_LEXER" in capsys.readouterr().err


def test_bad_log_level(capsys):
    assert main(["--log-level", "loud", "-c", "1"]) == 2


def test_deeply_nested_forms_are_reported(capsys):
    depth = sys.getrecursionlimit() * 2
    code = "(begin " * depth + "1" + ")" * depth + " (quote " + "(" * depth + ")" * depth + ") ok"
    assert main(["-c", code]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "error: form nested too deeply",
        "error: form nested too deeply",
        "ok",
    ]
