# minilisp

A small Lisp interpreter. It tokenizes and parses Lisp source. It then
evaluates the result in a global environment that holds a handful of built-in
functions. Top-level definitions persist from one expression to the next.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start an interactive session:

```
minilisp
```

The session prints `Lisp REPL` and `Type 'exit' to quit.`, then shows a `> `
prompt. Each line is evaluated on its own and its value is printed. Errors go to
standard error and look like this:

```
Error: Evaluation Error: Undefined variable: 'x'
```

The stage named in the message is one of `Tokenization Error`,
`Parsing Error` or `Evaluation Error`. Type `exit`, or send end-of-file, to
leave.

Run a file:

```
minilisp program.lisp
```

The command first prints `Running file: program.lisp`. It then evaluates every
expression in the file in order. If the last expression yields a value other
than `nil`, that value is printed. When the program fails, the message goes to
standard error as `Error in file <path>: <stage>: <message>` and the exit status
is 1. The exit status is also 1 when the file cannot be read. Giving more than
one argument prints a usage line and exits with status 1.

## The language

- Numbers are floating point and must start with a digit: `42`, `3.14`. A
  leading `-` or `.` makes an identifier, so write `(- 5)` for minus five.
  Whole numbers print without a decimal part: `49`, `2.5`.
- Strings are written in double quotes: `"hello"`. There are no escape
  sequences, and a string ends at the next `"`.
- Booleans: `true`, `false`.
- `()` evaluates to `nil`.
- An identifier is any run of characters other than whitespace, parentheses
  and `"`.

Special forms:

- `(if condition then [else])`: only the value `true` selects `then`. Any other
  value selects `else`, or gives `nil` when there is no `else`.
- `(let name value)` binds `name` in the current environment and gives `nil`.
- `(lambda (params ...) body ...)` creates a closure over the current
  environment. A call must pass exactly as many arguments as there are
  parameters. The value of the last body expression is the result.

Built-in functions:

| Name | Behaviour |
| --- | --- |
| `+` | sum of any number of numbers (`0` with none) |
| `-` | negates one number, or subtracts the rest from the first |
| `*` | product of any number of numbers (`1` with none) |
| `/` | divides exactly two numbers; dividing by zero is an error |
| `=`, `!=` | compare exactly two values of any kind; values of different kinds are never equal |
| `>`, `<`, `>=`, `<=` | compare exactly two numbers |
| `print` | prints its arguments separated by spaces, then a newline; gives `nil` |

A session:

```
> (let square (lambda (x) (* x x)))
nil
> (square 7)
49
> (if (> 3 2) "yes" "no")
yes
> (/ 1 0)
Error: Evaluation Error: Division by zero
```

## Library use

```python
from minilisp.cli import process_input
from minilisp.evaluator import Evaluator
from minilisp.values import format_value

evaluator = Evaluator()
print(format_value(process_input(evaluator, "(+ 1 2 3)")))  # 6
```

`process_input` raises `TokenizerError`, `ParserError` or `EvalError`, from the
modules below, for the stage that failed.

Each layer can also be used on its own:

- `minilisp.tokens`: `tokenize(source)` or `Tokenizer(source).tokenize()`
  returns a list of `Token` objects (each has a `TokenKind` and an optional
  value) that ends with an EOF token.
- `minilisp.parser`: `parse(tokens)` returns a list of expressions built from
  `Number`, `Str`, `Boolean`, `Identifier` and `ListExpr`.
- `minilisp.evaluator`: `Evaluator().eval_program(expressions)` evaluates the
  expressions in `Evaluator.global_env` and returns the last value, or `NIL`.
  `Evaluator.evaluate(expr, env)` evaluates one expression in a given
  `Environment`.
- `minilisp.environment`: `Environment` has `get`, `define` and `set`.
  `global_environment()` returns a fresh scope holding the built-ins.
- `minilisp.values`: `NIL`, `Builtin`, `Lambda`, `format_value(value)` and
  `values_equal(a, b)`.
- `minilisp.errors`: `EvalError` and its subclasses `UndefinedVariable`,
  `EvalTypeError`, `WrongNumArgs`, `NotCallable`, `SpecialFormError` and
  `DivisionByZero`.

Runtime values are plain Python objects: numbers are `float`, strings are
`str`, booleans are `bool`, and nothing is `NIL`.

## What it does not do

The language is deliberately small. It has no comments and no quoting. It has
no list values or list functions, no way to reassign a variable other than
binding it again with `let`, and no escape sequences in strings. The
interactive prompt evaluates one line at a time, so an expression cannot
continue onto a second line.