"""Build a :class:`~pyuci.tree.ConfigDocument` from UCI text.

Grammar, one statement per line::

    config  TYPE [NAME]
    option  NAME VALUE
    list    NAME VALUE

Parsing stops at the first error; no partial document is returned.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .errors import (
    InvalidSectionNameError,
    MissingOptionNameError,
    MissingSectionTypeError,
    MissingValueError,
    OptionOutsideSectionError,
    UnexpectedTokenError,
)
from .lexer import Token, TokenType, tokenize
from .tree import ConfigDocument, Section

__all__ = ["parse", "parse_tokens"]

logger = logging.getLogger(__name__)

_VALUE_TYPES = (TokenType.IDENT, TokenType.STRING)


def _statements(tokens: Iterable[Token]) -> Iterator[list[Token]]:
    """Group tokens into per-line statements, dropping comments."""
    current: list[Token] = []
    for token in tokens:
        if token.type is TokenType.COMMENT:
            continue
        if token.type in (TokenType.NEWLINE, TokenType.EOF):
            if current:
                yield current
                current = []
            if token.type is TokenType.EOF:
                return
            continue
        current.append(token)
    if current:
        yield current


def _check_args(keyword: Token, args: list[Token], limit: int) -> None:
    for arg in args:
        if arg.type not in _VALUE_TYPES:
            raise UnexpectedTokenError(
                f"unexpected {arg.type.value} {arg.value!r} in {keyword.value} statement",
                arg.line,
            )
    if len(args) > limit:
        extra = args[limit]
        raise UnexpectedTokenError(
            f"unexpected {extra.value!r} after {keyword.value} statement", extra.line
        )


class _Parser:
    def __init__(self, package: str) -> None:
        self.document = ConfigDocument(package)
        self.current: Section | None = None

    def feed(self, statement: list[Token]) -> None:
        keyword, args = statement[0], statement[1:]
        if keyword.type is not TokenType.KEYWORD:
            raise UnexpectedTokenError(
                f"expected keyword (config, option, list), got {keyword.value!r}",
                keyword.line,
            )
        if keyword.value == "config":
            self._config(keyword, args)
        else:
            self._option(keyword, args)

    def _config(self, keyword: Token, args: list[Token]) -> None:
        _check_args(keyword, args, 2)
        if not args or args[0].value == "":
            raise MissingSectionTypeError("config statement without a section type", keyword.line)
        name = args[1].value if len(args) > 1 and args[1].value else None
        if name is not None and name.startswith("@"):
            raise InvalidSectionNameError(
                f"section name {name!r} may not start with '@'", args[1].line
            )
        self.current = self.document.add(Section(args[0].value, name))

    def _option(self, keyword: Token, args: list[Token]) -> None:
        if self.current is None:
            raise OptionOutsideSectionError(
                f"{keyword.value} statement before any config statement", keyword.line
            )
        _check_args(keyword, args, 2)
        if not args:
            raise MissingOptionNameError(f"{keyword.value} statement without a name", keyword.line)
        if len(args) < 2:
            raise MissingValueError(
                f"{keyword.value} {args[0].value!r} without a value", keyword.line
            )
        name, value = args[0].value, args[1].value
        if keyword.value == "option":
            self.current.set_scalar(name, value)
        else:
            self.current.append_list(name, value)


def parse_tokens(tokens: Iterable[Token], package: str = "") -> ConfigDocument:
    parser = _Parser(package)
    for statement in _statements(tokens):
        parser.feed(statement)
    logger.debug(
        "parsed package %r: %d section(s)", package, len(parser.document.sections)
    )
    return parser.document


def parse(text: str, package: str = "") -> ConfigDocument:
    """Parse UCI *text* into a document tagged with *package*.

    Raises :class:`~pyuci.errors.LexError` or :class:`~pyuci.errors.ParseError`
    on the first malformed construct.
    """
    return parse_tokens(tokenize(text), package)
