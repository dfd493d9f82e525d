"""Command-line front end: an interactive prompt or a whole program file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from .errors import EvalError
from .evaluator import Evaluator
from .parser import ParserError, parse
from .tokens import TokenizerError, tokenize
from .values import NIL, format_value

_STAGES = (
    (TokenizerError, "Tokenization Error"),
    (ParserError, "Parsing Error"),
    (EvalError, "Evaluation Error"),
)
_INPUT_ERRORS = tuple(kind for kind, _ in _STAGES)


def _describe(error: Exception) -> str:
    for kind, stage in _STAGES:
        if isinstance(error, kind):
            return f"{stage}: {error}"
    return str(error)


def process_input(evaluator: Evaluator, text: str) -> Any:
    """Tokenize, parse and evaluate ``text``; return the value of the last expression.

    Raises TokenizerError, ParserError or EvalError for the stage that failed.
    """
    return evaluator.eval_program(parse(tokenize(text)))


def run_repl(evaluator: Evaluator) -> None:
    """Read lines from standard input and print the value of each until ``exit``."""
    print("Lisp REPL")
    print("Type 'exit' to quit.")
    while True:
        try:
            line = input("> ")
        except EOFError:
            print("\nExiting REPL.")
            break
        line = line.strip()
        if line == "exit":
            print("Exiting REPL.")
            break
        if not line:
            continue
        try:
            value = process_input(evaluator, line)
        except _INPUT_ERRORS as error:
            print(f"Error: {_describe(error)}", file=sys.stderr)
        else:
            print(format_value(value))


def run_file(evaluator: Evaluator, path) -> int:
    """Run the program in ``path``; print its final value unless nil.

    Returns the exit status: 0 on success, 1 if the program failed.
    OSError from reading the file propagates.
    """
    print(f"Running file: {path}")
    contents = Path(path).read_text(encoding="utf-8")
    try:
        value = process_input(evaluator, contents)
    except _INPUT_ERRORS as error:
        print(f"Error in file {path}: {_describe(error)}", file=sys.stderr)
        return 1
    if value is not NIL:
        print(format_value(value))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the prompt with no arguments, or run the single file given."""
    args = list(sys.argv[1:] if argv is None else argv)
    evaluator = Evaluator()
    if not args:
        run_repl(evaluator)
        return 0
    if len(args) == 1:
        try:
            return run_file(evaluator, args[0])
        except OSError as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
    print("Usage: minilisp [file_path]", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())