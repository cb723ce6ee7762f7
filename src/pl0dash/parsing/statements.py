"""Statement and condition productions.

The statement alternative is chosen from the current token alone. Any
token that starts none of them yields the empty statement, which consumes
nothing and has no children.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pl0dash.nodes import SyntaxKind, SyntaxNode
from pl0dash.tokens import RELATIONAL_OPERATORS, Keyword, Symbol, TokenType

if TYPE_CHECKING:
    from pl0dash.parsing.protocols import ParserHost

# Keywords introducing a statement followed by one expression
_EXPRESSION_STATEMENTS = (Keyword.RETURN, Keyword.WRITE)


class StatementParsingMixin:
    """Mixin providing Statement and Condition."""

    def _parse_statement(self: ParserHost) -> SyntaxNode:
        with self._production():
            children: list[SyntaxNode] = []
            if self._check_type(TokenType.IDENTIFIER):
                children.append(self._advance())
                children.append(self._expect_symbol(Symbol.ASSIGN))
                children.append(self._parse_expression())
            elif self._check_keyword(Keyword.BEGIN):
                children.append(self._advance())
                children.append(self._parse_statement())
                while self._check_symbol(Symbol.SEMICOLON):
                    children.append(self._advance())
                    children.append(self._parse_statement())
                children.append(self._expect_keyword(Keyword.END))
            elif self._check_keyword(Keyword.IF):
                children.append(self._advance())
                children.append(self._parse_condition())
                children.append(self._expect_keyword(Keyword.THEN))
                children.append(self._parse_statement())
            elif self._check_keyword(Keyword.WHILE):
                children.append(self._advance())
                children.append(self._parse_condition())
                children.append(self._expect_keyword(Keyword.DO))
                children.append(self._parse_statement())
            elif any(self._check_keyword(kw) for kw in _EXPRESSION_STATEMENTS):
                children.append(self._advance())
                children.append(self._parse_expression())
            elif self._check_keyword(Keyword.WRITELN):
                children.append(self._advance())
        return SyntaxNode(SyntaxKind.STATEMENT, tuple(children))

    def _parse_condition(self: ParserHost) -> SyntaxNode:
        with self._production():
            if self._check_keyword(Keyword.ODD):
                children = [self._advance(), self._parse_expression()]
            else:
                children = [self._parse_expression()]
                if not self._check_symbol(*RELATIONAL_OPERATORS):
                    raise self._error("relational operator")
                children.append(self._advance())
                children.append(self._parse_expression())
        return SyntaxNode(SyntaxKind.CONDITION, tuple(children))
