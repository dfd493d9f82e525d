"""A small Lisp interpreter: tokenizer, parser, evaluator and command line."""

__version__ = "0.1.0"