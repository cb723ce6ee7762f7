"""Identifier and keyword scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from pl0dash.lexer.charclass import is_word_byte
from pl0dash.tokens import Keyword, Token, TokenType


class WordScannerMixin:
    """Mixin providing identifier/keyword scanning."""

    def _accept(self, predicate: Callable[[int], bool]) -> int | None:
        """Consume the next byte if it matches. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: object) -> Token:
        """Create token at the saved start position. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_word(self, first: int) -> Token:
        """Scan a letter followed by letters and digits.

        Reserved words become KEYWORD tokens, anything else an IDENTIFIER.
        """
        word = bytearray((first,))
        while (byte := self._accept(is_word_byte)) is not None:
            word.append(byte)
        text = word.decode("ascii")
        keyword = Keyword.lookup(text)
        if keyword is not None:
            return self._make_token(TokenType.KEYWORD, keyword)
        return self._make_token(TokenType.IDENTIFIER, text)
