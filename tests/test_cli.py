import io

import pytest

from minilisp.cli import main, process_input, run_file, run_repl
from minilisp.errors import UndefinedVariable, EvalError
from minilisp.evaluator import Evaluator
from minilisp.parser import UnmatchedParenthesis
from minilisp.tokens import UnterminatedString
from minilisp.values import NIL


@pytest.fixture
def evaluator():
    return Evaluator()


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_process_input_evaluates_expression(evaluator):
    assert process_input(evaluator, "(+ 1 2)") == 3.0


def test_process_input_keeps_definitions(evaluator):
    assert process_input(evaluator, "(let x 5)") is NIL
    assert process_input(evaluator, "x") == 5.0


def test_process_input_returns_last_value(evaluator):
    assert process_input(evaluator, "(let f (lambda (a) (* a a))) (f 4)") == 16.0


def test_process_input_empty_is_nil(evaluator):
    assert process_input(evaluator, "   ") is NIL


def test_process_input_tokenizer_error(evaluator):
    with pytest.raises(UnterminatedString):
        process_input(evaluator, '"open')


def test_process_input_parser_error(evaluator):
    with pytest.raises(UnmatchedParenthesis):
        process_input(evaluator, "(+ 1 2")


def test_process_input_eval_error(evaluator):
    with pytest.raises(UndefinedVariable):
        process_input(evaluator, "missing")


def test_repl_prints_results_and_exits(evaluator, monkeypatch, capsys):
    _feed(monkeypatch, "(+ 1 2)\nexit\n")
    run_repl(evaluator)
    out = capsys.readouterr().out
    assert "3\n" in out
    assert out.endswith("Exiting REPL.\n")


def test_repl_reports_errors_and_continues(evaluator, monkeypatch, capsys):
    _feed(monkeypatch, "y\n(let y 2)\ny\nexit\n")
    run_repl(evaluator)
    captured = capsys.readouterr()
    assert captured.err == "Error: Evaluation Error: Undefined variable: 'y'\n"
    assert "2\n" in captured.out


def test_repl_tokenizer_error_prefix(evaluator, monkeypatch, capsys):
    _feed(monkeypatch, '"abc\nexit\n')
    run_repl(evaluator)
    assert capsys.readouterr().err.startswith("Error: Tokenization Error: ")


def test_repl_parser_error_prefix(evaluator, monkeypatch, capsys):
    _feed(monkeypatch, ")\nexit\n")
    run_repl(evaluator)
    assert capsys.readouterr().err == "Error: Parsing Error: Unmatched parenthesis\n"


def test_repl_end_of_input(evaluator, monkeypatch, capsys):
    _feed(monkeypatch, "")
    run_repl(evaluator)
    assert capsys.readouterr().out.endswith("\nExiting REPL.\n")


def test_repl_skips_blank_lines(evaluator, monkeypatch, capsys):
    _feed(monkeypatch, "\n   \nexit\n")
    run_repl(evaluator)
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out.count("> ") == 3


def test_run_file_prints_final_value(evaluator, tmp_path, capsys):
    program = tmp_path / "prog.lisp"
    program.write_text("(let x 10)\n(* x 2)\n")
    assert run_file(evaluator, program) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Running file: {program}\n")
    assert out.endswith("20\n")


def test_run_file_nil_result_prints_nothing_more(evaluator, tmp_path, capsys):
    program = tmp_path / "prog.lisp"
    program.write_text("(let x 10)")
    assert run_file(evaluator, program) == 0
    assert capsys.readouterr().out == f"Running file: {program}\n"


def test_run_file_error_returns_one(evaluator, tmp_path, capsys):
    program = tmp_path / "bad.lisp"
    program.write_text("(/ 1 0)")
    assert run_file(evaluator, program) == 1
    assert capsys.readouterr().err == (
        f"Error in file {program}: Evaluation Error: Division by zero\n"
    )


def test_run_file_missing_raises(evaluator, tmp_path):
    with pytest.raises(OSError):
        run_file(evaluator, tmp_path / "absent.lisp")


def test_main_runs_file(tmp_path, capsys):
    program = tmp_path / "prog.lisp"
    program.write_text('(print "hi" 1)')
    assert main([str(program)]) == 0
    assert "hi 1\n" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.lisp")]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_main_too_many_arguments(capsys):
    assert main(["a", "b"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_without_arguments_starts_repl(monkeypatch, capsys):
    _feed(monkeypatch, "(- 5)\nexit\n")
    assert main([]) == 0
    assert "-5\n" in capsys.readouterr().out


def test_errors_from_process_input_are_eval_errors(evaluator):
    with pytest.raises(EvalError):
        process_input(evaluator, "(1 2)")