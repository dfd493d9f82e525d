"""Syntax tree nodes and the parser that builds them from tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .tokens import Token, TokenKind


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Str:
    value: str


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class ListExpr:
    elements: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))


Expression = Union[Number, Str, Boolean, Identifier, ListExpr]


class ParserError(Exception):
    """Raised when a token sequence is not a valid program."""


class UnexpectedToken(ParserError):
    """A token other than the one the grammar requires."""

    def __init__(self, token: Token, expected: str) -> None:
        self.token = token
        self.expected = expected
        super().__init__(f"Unexpected token: {token!r}. Expected {expected}")


class UnmatchedParenthesis(ParserError):
    """A closing parenthesis without an opener, or an opener never closed."""

    def __init__(self) -> None:
        super().__init__("Unmatched parenthesis")


class EndOfInput(ParserError):
    """The tokens ran out in the middle of an expression."""

    def __init__(self) -> None:
        super().__init__("Unexpected end of input during parsing")


class Parser:
    """Builds a list of top-level expressions from a token sequence."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def parse(self) -> list[Expression]:
        """Parse every expression up to the EOF token or the end of the tokens."""
        self._pos = 0
        program: list[Expression] = []
        while self._pos < len(self._tokens) and not self._check(TokenKind.EOF):
            program.append(self._parse_expression())
        return program

    def _peek(self) -> Token:
        try:
            return self._tokens[self._pos]
        except IndexError:
            raise EndOfInput() from None

    def _check(self, kind: TokenKind) -> bool:
        return self._pos < len(self._tokens) and self._tokens[self._pos].kind is kind

    def _expect(self, kind: TokenKind) -> Token:
        token = self._peek()
        if token.kind is not kind:
            raise UnexpectedToken(token, kind.name)
        self._pos += 1
        return token

    def _parse_expression(self) -> Expression:
        token = self._peek()
        kind = token.kind
        if kind is TokenKind.LEFT_PAREN:
            return self._parse_list()
        if kind is TokenKind.RIGHT_PAREN:
            raise UnmatchedParenthesis()
        if kind is TokenKind.EOF:
            raise EndOfInput()

        self._pos += 1
        if kind is TokenKind.NUMBER:
            return Number(float(token.value))
        if kind is TokenKind.STRING:
            return Str(token.value)
        if token.value == "true":
            return Boolean(True)
        if token.value == "false":
            return Boolean(False)
        return Identifier(token.value)

    def _parse_list(self) -> ListExpr:
        self._expect(TokenKind.LEFT_PAREN)
        elements: list[Expression] = []
        while not self._check(TokenKind.RIGHT_PAREN):
            if self._check(TokenKind.EOF):
                raise UnmatchedParenthesis()
            elements.append(self._parse_expression())
        self._expect(TokenKind.RIGHT_PAREN)
        return ListExpr(elements)


def parse(tokens: Iterable[Token]) -> list[Expression]:
    """Parse a token sequence into a list of top-level expressions."""
    return Parser(tokens).parse()