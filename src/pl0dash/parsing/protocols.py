"""Protocols defining the parser mixin contracts.

Mixin methods that call across mixin boundaries annotate ``self`` as the
protocol they require::

    def _parse_statement(self: ParserHost) -> SyntaxNode:
        expression = self._parse_expression()
        ...

Type checkers verify that the concrete Parser satisfies every protocol at
composition time. Protocols are purely structural, no runtime overhead.
"""

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from pl0dash.errors import NestingTooDeepError, ParseError
from pl0dash.lexer import Lexer
from pl0dash.nodes import SyntaxNode
from pl0dash.tokens import Keyword, Symbol, Token, TokenType


@runtime_checkable
class TokenNavHost(Protocol):
    """Contract for the one-token lookahead buffer.

    Provided by: TokenNavigationMixin
    Required by: every production mixin
    """

    _lexer: Lexer
    _current: Token | None
    _allow_trailing: bool

    def _refill(self) -> None: ...
    def _at_end(self) -> bool: ...
    def _check_keyword(self, keyword: Keyword) -> bool: ...
    def _check_symbol(self, *symbols: Symbol) -> bool: ...
    def _check_type(self, token_type: TokenType) -> bool: ...
    def _advance(self, *, refill: bool = True) -> SyntaxNode: ...
    def _expect_keyword(self, keyword: Keyword) -> SyntaxNode: ...
    def _expect_symbol(self, symbol: Symbol, *, refill: bool = True) -> SyntaxNode: ...
    def _expect_type(self, token_type: TokenType) -> SyntaxNode: ...
    def _error(self, expected: str) -> ParseError: ...
    def _production(self) -> AbstractContextManager[None]: ...
    def _nesting_error(self, message: str) -> NestingTooDeepError: ...


@runtime_checkable
class ExpressionParsingHost(Protocol):
    """Provided by: ExpressionParsingMixin. Required by: statements."""

    def _parse_expression(self) -> SyntaxNode: ...
    def _parse_term(self) -> SyntaxNode: ...
    def _parse_factor(self) -> SyntaxNode: ...


@runtime_checkable
class StatementParsingHost(Protocol):
    """Provided by: StatementParsingMixin. Required by: blocks."""

    def _parse_statement(self) -> SyntaxNode: ...
    def _parse_condition(self) -> SyntaxNode: ...


@runtime_checkable
class BlockParsingHost(Protocol):
    """Provided by: BlockParsingMixin. Required by: Parser.parse()."""

    def _parse_program(self) -> SyntaxNode: ...
    def _parse_block(self) -> SyntaxNode: ...


@runtime_checkable
class ParserHost(
    TokenNavHost,
    ExpressionParsingHost,
    StatementParsingHost,
    BlockParsingHost,
    Protocol,
):
    """Full parser contract combining all mixin requirements.

    Required instance attributes (set in __init__):
        _lexer: Lexer, the only token source
        _current: Token | None, buffered lookahead (None when exhausted)
        _depth: int, current production nesting
        _max_depth: int, limit read from ParseConfig
        _token_count: int, tokens consumed so far
    """

    _depth: int
    _max_depth: int
    _token_count: int


__all__ = [
    "BlockParsingHost",
    "ExpressionParsingHost",
    "ParserHost",
    "StatementParsingHost",
    "TokenNavHost",
]
