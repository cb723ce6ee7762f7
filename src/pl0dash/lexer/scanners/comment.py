"""Comment scanner mixin.

Comments are ``/* ... */`` spans and may cover several lines. They produce
no token.
"""

from __future__ import annotations

from pl0dash.errors import CommentNotTerminatedError

_SLASH = ord("/")
_ASTERISK = ord("*")


class CommentScannerMixin:
    """Mixin providing comment skipping."""

    def _read(self) -> int | None:
        """Read one byte. Implemented by Lexer."""
        raise NotImplementedError

    def _unread(self, byte: int) -> None:
        """Push one byte back. Implemented by Lexer."""
        raise NotImplementedError

    def _unterminated_comment(self) -> CommentNotTerminatedError:
        """Build an error located at the comment start. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_comment(self) -> bool:
        """Skip a comment whose leading ``/`` was just read.

        Returns:
            True if a comment was consumed, False if the ``/`` is a plain
            division symbol (the byte after it stays unread).

        Raises:
            CommentNotTerminatedError: input ended before ``*/``
        """
        opener = self._read()
        if opener != _ASTERISK:
            if opener is not None:
                self._unread(opener)
            return False

        after_star = False
        while (byte := self._read()) is not None:
            if after_star and byte == _SLASH:
                return True
            after_star = byte == _ASTERISK
        raise self._unterminated_comment()
