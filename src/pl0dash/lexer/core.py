"""Pull-based lexer over a byte stream.

The lexer reads one byte at a time, classifies it, and hands the rest of
the token to a scanner mixin. It never holds more than one byte of
lookahead: a scanner that peeks at a byte it does not want puts it back into
a one-byte pushback buffer, and the position cursor is restored with it.

Lexer instances are single-use. Create one per source unit.

"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from typing import BinaryIO

from pl0dash.errors import CannotReadByteError, CommentNotTerminatedError, UndefinedTokenError
from pl0dash.lexer.charclass import CharClass, classify
from pl0dash.lexer.scanners import (
    CommentScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    WordScannerMixin,
)
from pl0dash.tokens import Token, TokenType

_NEWLINE = ord("\n")

Source = bytes | bytearray | memoryview | str | BinaryIO


class Lexer(
    NumberScannerMixin,
    WordScannerMixin,
    OperatorScannerMixin,
    CommentScannerMixin,
):
    """Lexer producing one Token per ``next_token()`` call.

    Usage:
            >>> lexer = Lexer(b"x := x + 1")
            >>> [t.literal for t in lexer.tokenize()]
            ['x', ':=', 'x', '+', '1']

    Position tracking:
        Lines and columns are 1-indexed and count bytes. Each token carries
        the position of its first byte.

    """

    __slots__ = (
        "_stream",
        "_source_file",
        "_pushback",
        "_offset",
        "_lineno",
        "_col",
        "_prev_position",
        "_start_offset",
        "_start_lineno",
        "_start_col",
    )

    def __init__(self, source: Source, *, source_file: str | None = None) -> None:
        """Initialize lexer over source bytes.

        Args:
            source: Raw bytes, text (encoded as UTF-8) or a binary stream
                opened for reading
            source_file: Optional source file path for error messages
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._stream: BinaryIO = io.BytesIO(bytes(source))
        else:
            self._stream = source
        self._source_file = source_file

        # Single byte of lookahead returned by _unread()
        self._pushback: int | None = None

        self._offset = 0
        self._lineno = 1
        self._col = 1
        # Cursor before the last byte read, restored by _unread()
        self._prev_position: tuple[int, int, int] = (0, 1, 1)

        self._start_offset = 0
        self._start_lineno = 1
        self._start_col = 1

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def position(self) -> tuple[int, int]:
        """Current (line, column) of the cursor."""
        return self._lineno, self._col

    def next_token(self) -> Token | None:
        """Return the next token, or None once the input is exhausted.

        Whitespace and comments between tokens are skipped.

        Raises:
            UndefinedTokenError: A byte that starts no token
            CommentNotTerminatedError: Input ended inside a comment
            CannotReadByteError: The underlying stream failed
        """
        while True:
            self._save_start()
            byte = self._read()
            if byte is None:
                return None

            char_class = classify(byte)
            if char_class is CharClass.WHITESPACE:
                continue
            if char_class is CharClass.DIGIT:
                return self._scan_number(byte)
            if char_class is CharClass.LETTER:
                return self._scan_word(byte)
            if char_class is CharClass.SLASH and self._skip_comment():
                continue
            return self._scan_symbol(byte)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until the input is exhausted."""
        while (token := self.next_token()) is not None:
            yield token

    # =========================================================================
    # Byte cursor
    # =========================================================================

    def _read(self) -> int | None:
        """Consume one byte, or return None at end of input."""
        if self._pushback is not None:
            byte = self._pushback
            self._pushback = None
        else:
            try:
                chunk = self._stream.read(1)
            except OSError as exc:
                raise CannotReadByteError(
                    f"cannot read byte: {exc}",
                    self._lineno,
                    self._col,
                    self._source_file,
                ) from exc
            if not chunk:
                return None
            byte = chunk[0]

        self._prev_position = (self._offset, self._lineno, self._col)
        self._offset += 1
        if byte == _NEWLINE:
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1
        return byte

    def _unread(self, byte: int) -> None:
        """Return the byte just read so the next _read() yields it again."""
        if self._pushback is not None:
            raise RuntimeError("pushback buffer already holds a byte")
        self._pushback = byte
        self._offset, self._lineno, self._col = self._prev_position

    def _accept(self, predicate: Callable[[int], bool]) -> int | None:
        """Consume and return the next byte if it satisfies ``predicate``."""
        byte = self._read()
        if byte is None:
            return None
        if predicate(byte):
            return byte
        self._unread(byte)
        return None

    # =========================================================================
    # Token construction
    # =========================================================================

    def _save_start(self) -> None:
        """Remember where the next token starts."""
        self._start_offset = self._offset
        self._start_lineno = self._lineno
        self._start_col = self._col

    def _make_token(self, token_type: TokenType, value: object) -> Token:
        return Token(
            type=token_type,
            value=value,  # type: ignore[arg-type]
            _lineno=self._start_lineno,
            _col=self._start_col,
            _start_offset=self._start_offset,
            _end_offset=self._offset,
            _source_file=self._source_file,
        )

    def _undefined(self, byte: int) -> UndefinedTokenError:
        return UndefinedTokenError(
            byte, self._start_lineno, self._start_col, self._source_file
        )

    def _unterminated_comment(self) -> CommentNotTerminatedError:
        return CommentNotTerminatedError(
            self._start_lineno, self._start_col, self._source_file
        )
