"""Lexical analysis: turning source text into a list of tokens."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterator, Union

# Characters with the Unicode White_Space property.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)
_WHITESPACE_RE = re.compile(f"[{_WHITESPACE}]*")
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_IDENTIFIER_RE = re.compile(f'[^{_WHITESPACE}()"]+')


class TokenKind(enum.Enum):
    """The kinds of token the tokenizer produces."""

    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    """A single token; ``value`` holds the text or number it carries, if any."""

    kind: TokenKind
    value: Union[str, float, None] = None


class TokenizerError(Exception):
    """Raised when the source text cannot be split into tokens."""

    def __init__(self, position: int, message: str) -> None:
        super().__init__(message)
        self.position = position


class UnexpectedCharacter(TokenizerError):
    """A character that cannot start any token."""

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        super().__init__(position, f"Unexpected character '{char}' at position {position}")


class UnterminatedString(TokenizerError):
    """A string literal without its closing quote."""

    def __init__(self, position: int) -> None:
        super().__init__(position, f"Unterminated string starting at position {position}")


class MalformedNumber(TokenizerError):
    """A numeric literal that cannot be read as a number."""

    def __init__(self, position: int) -> None:
        super().__init__(position, f"Malformed number at position {position}")


class Tokenizer:
    """Splits source text into tokens, ending with an EOF token."""

    def __init__(self, source: str) -> None:
        self.source = source

    def tokenize(self) -> list[Token]:
        """Return every token of the source, the last one being EOF."""
        return list(self._scan())

    def _scan(self) -> Iterator[Token]:
        text = self.source
        end = len(text)
        pos = 0
        while True:
            pos = _WHITESPACE_RE.match(text, pos).end()
            if pos >= end:
                yield Token(TokenKind.EOF)
                return

            char = text[pos]
            if char == "(":
                yield Token(TokenKind.LEFT_PAREN)
                pos += 1
            elif char == ")":
                yield Token(TokenKind.RIGHT_PAREN)
                pos += 1
            elif char == '"':
                close = text.find('"', pos + 1)
                if close < 0:
                    raise UnterminatedString(pos)
                yield Token(TokenKind.STRING, text[pos + 1 : close])
                pos = close + 1
            elif "0" <= char <= "9":
                match = _NUMBER_RE.match(text, pos)
                try:
                    number = float(match.group())
                except ValueError:
                    raise MalformedNumber(pos) from None
                yield Token(TokenKind.NUMBER, number)
                pos = match.end()
            else:
                match = _IDENTIFIER_RE.match(text, pos)
                if match is None:
                    raise UnexpectedCharacter(char, pos)
                yield Token(TokenKind.IDENTIFIER, match.group())
                pos = match.end()


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` and return the token list."""
    return Tokenizer(source).tokenize()