"""Program, block and declaration productions.

Program    := Block '.'
Block      := (ConstDecl | VarDecl | FuncDecl)* Statement
ConstDecl  := 'const' Ident '=' Number (',' Ident '=' Number)* ';'
VarDecl    := 'var' Ident (',' Ident)* ';'
FuncDecl   := 'function' Ident '(' (Ident (',' Ident)*)? ')' Block ';'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pl0dash.nodes import SyntaxKind, SyntaxNode
from pl0dash.tokens import Keyword, Symbol, TokenType

if TYPE_CHECKING:
    from pl0dash.parsing.protocols import ParserHost


class BlockParsingMixin:
    """Mixin providing the block-level productions."""

    def _parse_program(self: ParserHost) -> SyntaxNode:
        with self._production():
            block = self._parse_block()
            # Nothing after the final period is read when trailing input is allowed
            period = self._expect_symbol(Symbol.PERIOD, refill=not self._allow_trailing)
            children = [block, period]
        return SyntaxNode(SyntaxKind.PROGRAM, tuple(children))

    def _parse_block(self: ParserHost) -> SyntaxNode:
        with self._production():
            children: list[SyntaxNode] = []
            while True:
                if self._check_keyword(Keyword.CONST):
                    children.append(self._parse_const_decl())
                elif self._check_keyword(Keyword.VAR):
                    children.append(self._parse_var_decl())
                elif self._check_keyword(Keyword.FUNCTION):
                    children.append(self._parse_func_decl())
                else:
                    break
            children.append(self._parse_statement())
        return SyntaxNode(SyntaxKind.BLOCK, tuple(children))

    def _parse_const_decl(self: ParserHost) -> SyntaxNode:
        with self._production():
            children = [self._expect_keyword(Keyword.CONST)]
            while True:
                children.append(self._expect_type(TokenType.IDENTIFIER))
                children.append(self._expect_symbol(Symbol.EQUAL))
                children.append(self._expect_type(TokenType.NUMBER))
                if not self._check_symbol(Symbol.COMMA):
                    break
                children.append(self._advance())
            children.append(self._expect_symbol(Symbol.SEMICOLON))
        return SyntaxNode(SyntaxKind.CONST_DECL, tuple(children))

    def _parse_var_decl(self: ParserHost) -> SyntaxNode:
        with self._production():
            children = [self._expect_keyword(Keyword.VAR)]
            while True:
                children.append(self._expect_type(TokenType.IDENTIFIER))
                if not self._check_symbol(Symbol.COMMA):
                    break
                children.append(self._advance())
            children.append(self._expect_symbol(Symbol.SEMICOLON))
        return SyntaxNode(SyntaxKind.VAR_DECL, tuple(children))

    def _parse_func_decl(self: ParserHost) -> SyntaxNode:
        with self._production():
            children = [
                self._expect_keyword(Keyword.FUNCTION),
                self._expect_type(TokenType.IDENTIFIER),
                self._expect_symbol(Symbol.LPAREN),
            ]
            # Parameter list (possibly empty)
            if self._check_type(TokenType.IDENTIFIER):
                children.append(self._advance())
                while self._check_symbol(Symbol.COMMA):
                    children.append(self._advance())
                    children.append(self._expect_type(TokenType.IDENTIFIER))
            children.append(self._expect_symbol(Symbol.RPAREN))
            children.append(self._parse_block())
            children.append(self._expect_symbol(Symbol.SEMICOLON))
        return SyntaxNode(SyntaxKind.FUNC_DECL, tuple(children))
