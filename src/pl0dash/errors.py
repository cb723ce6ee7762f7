"""Exception classes for pl0dash.

Every error is fatal for the source unit being processed: the lexer and the
parser raise at the point of detection and never return a partial tree.

Hierarchy::

    Pl0DashError
    ├── LexError
    │   ├── UndefinedTokenError
    │   ├── CommentNotTerminatedError
    │   └── CannotReadByteError
    ├── ParseError
    │   ├── UnexpectedEndError
    │   └── NestingTooDeepError
    └── RenderError
"""

from __future__ import annotations


def _format_location(
    lineno: int | None,
    col_offset: int | None,
    source_file: str | None,
) -> str:
    location = ""
    if source_file:
        location = f"{source_file}:"
    if lineno is not None:
        location += f"{lineno}:"
        if col_offset is not None:
            location += f"{col_offset}:"
    if location:
        location = location.rstrip(":") + " "
    return location


class Pl0DashError(Exception):
    """Base exception for all pl0dash errors."""

    pass


class LexError(Pl0DashError):
    """Error while turning source bytes into tokens."""

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexical error with optional location.

        Args:
            message: Error description
            lineno: Line number where the error occurred (1-indexed)
            col_offset: Column where the error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        super().__init__(f"{_format_location(lineno, col_offset, source_file)}{message}")


class UndefinedTokenError(LexError):
    """A byte (or byte pair) that starts no token of the language."""

    def __init__(
        self,
        byte: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.byte = byte
        super().__init__(
            f"undefined token starting with byte {bytes([byte])!r}",
            lineno,
            col_offset,
            source_file,
        )


class CommentNotTerminatedError(LexError):
    """End of input reached inside a ``/* ... */`` comment."""

    def __init__(
        self,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        super().__init__("comment is not terminated", lineno, col_offset, source_file)


class CannotReadByteError(LexError):
    """The underlying byte stream failed."""

    pass


class ParseError(Pl0DashError):
    """Unexpected token at a specific production.

    Attributes:
        expected: Description of what the production expected
        found: Description of the token actually found
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        *,
        expected: str | None = None,
        found: str | None = None,
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.expected = expected
        self.found = found
        super().__init__(f"{_format_location(lineno, col_offset, source_file)}{message}")


class UnexpectedEndError(ParseError):
    """Input ran out while a production was still incomplete."""

    pass


class NestingTooDeepError(ParseError):
    """Source nesting exceeds the configured maximum depth."""

    pass


class RenderError(Pl0DashError):
    """The output sink failed while emitting a tree."""

    pass
