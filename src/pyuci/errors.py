class UciError(Exception):
    """Base class for pyuci errors."""


class _PositionalError(UciError):
    """Error tied to a line of the source text."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class LexError(_PositionalError):
    """Raised when the source text cannot be split into tokens."""


class UnterminatedStringError(LexError):
    """Raised when a quoted string is never closed."""


class ParseError(_PositionalError):
    """Raised when tokens do not form a valid UCI statement."""


class MissingSectionTypeError(ParseError):
    """Raised for a ``config`` statement without a section type."""


class OptionOutsideSectionError(ParseError):
    """Raised for an ``option``/``list`` statement before any ``config``."""


class MissingOptionNameError(ParseError):
    """Raised for an ``option``/``list`` statement without a name."""


class MissingValueError(ParseError):
    """Raised for an ``option``/``list`` statement without a value."""


class UnexpectedTokenError(ParseError):
    """Raised for a token that has no place in the current statement."""


class InvalidSectionNameError(ParseError):
    """Raised for a section name that would read as an ``@type[index]`` selector."""


class QueryError(UciError):
    pass


class NotFoundError(QueryError, KeyError):
    """Raised when a section or option is absent."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class InvalidSelectorError(QueryError, ValueError):
    """Raised when an ``@type[index]`` selector is malformed."""


class ExportError(UciError):
    """Raised when a package cannot be rendered in the requested format."""


class UciIOError(UciError):
    """Raised when a package file cannot be read or written."""
