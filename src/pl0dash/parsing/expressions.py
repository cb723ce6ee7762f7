"""Expression, term and factor productions.

Expression := ('+'|'-')? Term (('+'|'-') Term)*
Term       := Factor (('*'|'/') Factor)*
Factor     := Ident ('(' (Expression (',' Expression)*)? ')')?
            | Number
            | '(' Expression ')'

A factor that is an identifier followed by ``(`` is a call and keeps both
parentheses as terminals, so ``f`` and ``f()`` produce different shapes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pl0dash.nodes import SyntaxKind, SyntaxNode
from pl0dash.tokens import Symbol, TokenType

if TYPE_CHECKING:
    from pl0dash.parsing.protocols import ParserHost

_ADDITIVE = (Symbol.PLUS, Symbol.MINUS)
_MULTIPLICATIVE = (Symbol.MULT, Symbol.DIV)


class ExpressionParsingMixin:
    """Mixin providing arithmetic expressions."""

    def _parse_expression(self: ParserHost) -> SyntaxNode:
        with self._production():
            children: list[SyntaxNode] = []
            # Unary sign, at most once
            if self._check_symbol(*_ADDITIVE):
                children.append(self._advance())
            children.append(self._parse_term())
            while self._check_symbol(*_ADDITIVE):
                children.append(self._advance())
                children.append(self._parse_term())
        return SyntaxNode(SyntaxKind.EXPRESSION, tuple(children))

    def _parse_term(self: ParserHost) -> SyntaxNode:
        with self._production():
            children = [self._parse_factor()]
            while self._check_symbol(*_MULTIPLICATIVE):
                children.append(self._advance())
                children.append(self._parse_factor())
        return SyntaxNode(SyntaxKind.TERM, tuple(children))

    def _parse_factor(self: ParserHost) -> SyntaxNode:
        with self._production():
            if self._check_type(TokenType.IDENTIFIER):
                children = [self._advance()]
                if self._check_symbol(Symbol.LPAREN):
                    children.append(self._advance())
                    if not self._check_symbol(Symbol.RPAREN):
                        children.append(self._parse_expression())
                        while self._check_symbol(Symbol.COMMA):
                            children.append(self._advance())
                            children.append(self._parse_expression())
                    children.append(self._expect_symbol(Symbol.RPAREN))
            elif self._check_type(TokenType.NUMBER):
                children = [self._advance()]
            elif self._check_symbol(Symbol.LPAREN):
                children = [
                    self._advance(),
                    self._parse_expression(),
                    self._expect_symbol(Symbol.RPAREN),
                ]
            else:
                raise self._error("identifier, number or '('")
        return SyntaxNode(SyntaxKind.FACTOR, tuple(children))
