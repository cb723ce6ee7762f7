"""Integer literal scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from pl0dash.lexer.charclass import CharClass, classify
from pl0dash.tokens import Token, TokenType


def _is_digit(byte: int) -> bool:
    return classify(byte) is CharClass.DIGIT


class NumberScannerMixin:
    """Mixin providing decimal integer scanning."""

    def _accept(self, predicate: Callable[[int], bool]) -> int | None:
        """Consume the next byte if it matches. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: object) -> Token:
        """Create token at the saved start position. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_number(self, first: int) -> Token:
        """Scan a run of digits starting with ``first``.

        Folds the digits with ``value * 10 + digit``. The first non-digit
        byte is left unread for the next token.
        """
        value = first - 0x30
        while (digit := self._accept(_is_digit)) is not None:
            value = value * 10 + (digit - 0x30)
        return self._make_token(TokenType.NUMBER, value)
