import io

from cminlex.cli import main, run, run_file, run_prompt
from cminlex.lexer import Lexer, tokenize


def test_run_prints_one_line_per_token():
    source = "int x; x = 10;"
    out, err = io.StringIO(), io.StringIO()
    had_error = run(source, out, err)
    assert had_error is False
    assert err.getvalue() == ""
    assert out.getvalue().splitlines() == [str(t) for t in tokenize(source)]


def test_run_reports_errors_to_err():
    source = "int @foo;"
    out, err = io.StringIO(), io.StringIO()
    assert run(source, out, err) is True
    lexer = Lexer(source)
    lexer.tokenize()
    assert err.getvalue().splitlines() == [str(e) for e in lexer.errors]
    assert out.getvalue().splitlines() == [str(t) for t in lexer.tokens]


def test_run_file_success(tmp_path):
    path = tmp_path / "prog.cm"
    path.write_text("int main(void) { return 0; }\n")
    out, err = io.StringIO(), io.StringIO()
    assert run_file(str(path), out, err) == 0
    assert out.getvalue().splitlines() == [str(t) for t in tokenize(path.read_text())]


def test_run_file_with_lex_error_returns_65(tmp_path):
    path = tmp_path / "bad.cm"
    path.write_text("int # x;")
    out, err = io.StringIO(), io.StringIO()
    assert run_file(str(path), out, err) == 65
    assert "Unexpected character '#'" in err.getvalue()


def test_run_file_missing_returns_66(tmp_path):
    missing = tmp_path / "missing.cm"
    out, err = io.StringIO(), io.StringIO()
    assert run_file(str(missing), out, err) == 66
    assert err.getvalue().strip() == f"Error: Could not open file '{missing}'"
    assert out.getvalue() == ""


def test_run_prompt_lexes_each_line():
    stdin = io.StringIO("int x;\n@\nreturn x;\n")
    out, err = io.StringIO(), io.StringIO()
    assert run_prompt(stdin, out, err) == 0
    text = out.getvalue()
    assert text.count("> ") == 4
    assert text.endswith("> ")
    assert err.getvalue().count("[Lexer Error]") == 1
    for line in ("int x;", "return x;"):
        for token in tokenize(line):
            assert str(token) in text


def test_main_rejects_extra_arguments(capsys):
    assert main(["a.cm", "b.cm"]) == 64
    assert capsys.readouterr().err.startswith("Usage:")


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "prog.cm"
    path.write_text("output(1);")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(t) for t in tokenize("output(1);")]


def test_main_without_arguments_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("if\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert str(tokenize("if")[0]) in out
    assert out.count("> ") == 2