"""Token navigation for the pl0dash parser.

The parser sees the token stream through exactly one buffered token,
``_current``. ``_refill()`` is the only method that calls the lexer; every
consuming method wraps ``_current`` in a terminal node and refills.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from pl0dash.errors import NestingTooDeepError, ParseError, UnexpectedEndError
from pl0dash.nodes import SyntaxNode
from pl0dash.tokens import Keyword, Symbol, Token, TokenType, describe_token

if TYPE_CHECKING:
    from pl0dash.lexer import Lexer

_TYPE_DESCRIPTIONS = {
    TokenType.IDENTIFIER: "identifier",
    TokenType.NUMBER: "number",
    TokenType.KEYWORD: "keyword",
    TokenType.SYMBOL: "symbol",
}


class TokenNavigationMixin:
    """Mixin providing the lookahead buffer and token matching.

    Required Host Attributes:
        - _lexer: Lexer
        - _current: Token | None
        - _depth: int
        - _max_depth: int
        - _token_count: int
        - _allow_trailing: bool

    """

    _lexer: Lexer
    _current: Token | None
    _depth: int
    _max_depth: int
    _token_count: int
    _allow_trailing: bool

    def _refill(self) -> None:
        """Load the next token from the lexer into the lookahead buffer."""
        self._current = self._lexer.next_token()

    def _at_end(self) -> bool:
        """Check if the token stream is exhausted."""
        return self._current is None

    def _check_keyword(self, keyword: Keyword) -> bool:
        return self._current is not None and self._current.is_keyword(keyword)

    def _check_symbol(self, *symbols: Symbol) -> bool:
        return self._current is not None and self._current.is_symbol(*symbols)

    def _check_type(self, token_type: TokenType) -> bool:
        return self._current is not None and self._current.type is token_type

    def _advance(self, *, refill: bool = True) -> SyntaxNode:
        """Consume the current token as a terminal node.

        With ``refill=False`` the lookahead buffer is left as is and the
        lexer is not read again.

        Raises:
            UnexpectedEndError: There is no current token
        """
        token = self._current
        if token is None:
            raise self._error("a token")
        self._token_count += 1
        if refill:
            self._refill()
        return SyntaxNode.terminal(token)

    def _expect_keyword(self, keyword: Keyword) -> SyntaxNode:
        if not self._check_keyword(keyword):
            raise self._error(f"'{keyword.value}'")
        return self._advance()

    def _expect_symbol(self, symbol: Symbol, *, refill: bool = True) -> SyntaxNode:
        if not self._check_symbol(symbol):
            raise self._error(f"'{symbol.value}'")
        return self._advance(refill=refill)

    def _expect_type(self, token_type: TokenType) -> SyntaxNode:
        if not self._check_type(token_type):
            raise self._error(_TYPE_DESCRIPTIONS[token_type])
        return self._advance()

    def _error(self, expected: str) -> ParseError:
        """Build the error for an unexpected current token.

        At end of input the error is an UnexpectedEndError located at the
        lexer's final position.
        """
        token = self._current
        found = describe_token(token)
        message = f"expected {expected}, found {found}"
        if token is None:
            lineno, col = self._lexer.position
            return UnexpectedEndError(
                message,
                lineno,
                col,
                self._lexer.source_file,
                expected=expected,
                found=found,
            )
        return ParseError(
            message,
            token.lineno,
            token.col,
            self._lexer.source_file,
            expected=expected,
            found=found,
        )

    @contextmanager
    def _production(self) -> Iterator[None]:
        """Track nesting depth for the duration of one production.

        Raises:
            NestingTooDeepError: The configured max_depth is exceeded
        """
        if self._depth >= self._max_depth:
            raise self._nesting_error(f"nesting exceeds maximum depth of {self._max_depth}")
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def _nesting_error(self, message: str) -> NestingTooDeepError:
        """Build a nesting error located at the current token."""
        token = self._current
        lineno, col = (token.lineno, token.col) if token else self._lexer.position
        return NestingTooDeepError(message, lineno, col, self._lexer.source_file)
