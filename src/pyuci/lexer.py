"""Tokenizer for UCI configuration text.

The lexer is line oriented: each logical line yields its tokens followed by a
``NEWLINE`` token, blank and comment-only lines yield no ``NEWLINE`` at all,
and the stream always ends with ``EOF``.  ``config``, ``option`` and ``list``
are keywords only when they are the first unquoted word of a line.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .errors import UnterminatedStringError

__all__ = ["KEYWORDS", "Lexer", "Token", "TokenType", "tokenize"]

KEYWORDS = ("config", "option", "list")

_QUOTES = "'\""
_BLANKS = " \t\r\f\v"


class TokenType(Enum):
    KEYWORD = "keyword"
    IDENT = "ident"
    STRING = "string"
    COMMENT = "comment"
    NEWLINE = "newline"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int

    def __str__(self) -> str:
        value = self.value if len(self.value) <= 25 else self.value[:25]
        return f"({self.type.value} {value!r} line {self.line})"


class Lexer:
    """Lazily split *text* into :class:`Token` objects.

    A lexer is single use; create a new one to scan the same text again.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def tokens(self) -> Iterator[Token]:
        text = self.text
        at_line_start = True
        pending_newline = False
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == "\n":
                if pending_newline:
                    yield Token(TokenType.NEWLINE, "\n", self.line)
                self.line += 1
                self.pos += 1
                at_line_start = True
                pending_newline = False
            elif ch in _BLANKS:
                self.pos += 1
            elif ch == "#":
                yield self._comment()
            else:
                token = self._word()
                if (
                    at_line_start
                    and token.type is TokenType.IDENT
                    and token.value in KEYWORDS
                ):
                    token = Token(TokenType.KEYWORD, token.value, token.line)
                at_line_start = False
                pending_newline = True
                yield token
        if pending_newline:
            yield Token(TokenType.NEWLINE, "\n", self.line)
        yield Token(TokenType.EOF, "", self.line)

    def _comment(self) -> Token:
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        token = Token(TokenType.COMMENT, self.text[self.pos + 1 : end], self.line)
        self.pos = end
        return token

    def _word(self) -> Token:
        """Scan one whitespace-delimited word made of quoted and bare parts."""
        text = self.text
        line = self.line
        parts: list[str] = []
        quoted = False
        while self.pos < len(text):
            ch = text[self.pos]
            if ch in _BLANKS or ch == "\n":
                break
            if ch in _QUOTES:
                parts.append(self._quoted(ch))
                quoted = True
            elif ch == "\\" and self.pos + 1 < len(text):
                escaped = text[self.pos + 1]
                if escaped == "\n":
                    self.line += 1
                parts.append(escaped)
                self.pos += 2
            else:
                parts.append(ch)
                self.pos += 1
        kind = TokenType.STRING if quoted else TokenType.IDENT
        return Token(kind, "".join(parts), line)

    def _quoted(self, quote: str) -> str:
        text = self.text
        opened_at = self.line
        self.pos += 1
        parts: list[str] = []
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == quote:
                self.pos += 1
                return "".join(parts)
            if ch == "\\":
                if self.pos + 1 >= len(text):
                    break
                ch = text[self.pos + 1]
                self.pos += 1
            if ch == "\n":
                self.line += 1
            parts.append(ch)
            self.pos += 1
        raise UnterminatedStringError("unterminated quoted string", opened_at)


def tokenize(text: str) -> Iterator[Token]:
    """Return a lazy token stream for *text*, terminated by ``EOF``."""
    return Lexer(text).tokens()
