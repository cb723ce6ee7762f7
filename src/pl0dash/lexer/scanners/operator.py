"""Operator and punctuation scanner mixin.

Single-byte symbols resolve through the symbol table directly. Bytes that
may begin a two-byte operator (``:=``, ``<>``, ``<=``, ``>=``) peek one
more byte; when the pair is not an operator the peeked byte goes back into
the lexer's pushback buffer so the next token starts with it.
"""

from __future__ import annotations

from pl0dash.errors import UndefinedTokenError
from pl0dash.tokens import Symbol, Token, TokenType

_SINGLE: dict[int, Symbol] = {
    ord(sym.value): sym for sym in Symbol if len(sym.value) == 1
}

_COMPOUND: dict[tuple[int, int], Symbol] = {
    (ord(sym.value[0]), ord(sym.value[1])): sym for sym in Symbol if len(sym.value) == 2
}

_COMPOUND_STARTERS = frozenset(first for first, _ in _COMPOUND)


class OperatorScannerMixin:
    """Mixin providing symbol scanning."""

    def _read(self) -> int | None:
        """Read one byte. Implemented by Lexer."""
        raise NotImplementedError

    def _unread(self, byte: int) -> None:
        """Push one byte back. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: object) -> Token:
        """Create token at the saved start position. Implemented by Lexer."""
        raise NotImplementedError

    def _undefined(self, byte: int) -> UndefinedTokenError:
        """Build an error located at the token start. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_symbol(self, first: int) -> Token:
        """Scan the operator or punctuation starting with ``first``.

        Raises:
            UndefinedTokenError: ``first`` starts no symbol (e.g. a lone ``:``)
        """
        if first in _COMPOUND_STARTERS:
            second = self._read()
            if second is not None:
                compound = _COMPOUND.get((first, second))
                if compound is not None:
                    return self._make_token(TokenType.SYMBOL, compound)
                self._unread(second)

        symbol = _SINGLE.get(first)
        if symbol is None:
            raise self._undefined(first)
        return self._make_token(TokenType.SYMBOL, symbol)
