"""Recursive descent parser producing a concrete syntax tree.

Consumes the token stream of a Lexer with one token of lookahead and
builds an immutable SyntaxTree whose shape mirrors the grammar.

Architecture:
The parser uses a mixin-based design, one mixin per group of productions:
- `TokenNavigationMixin`: lookahead buffer, matching, depth guard
- `BlockParsingMixin`: Program, Block, ConstDecl, VarDecl, FuncDecl
- `StatementParsingMixin`: Statement, Condition
- `ExpressionParsingMixin`: Expression, Term, Factor

Errors are fatal: the first unexpected token raises ParseError and no
partial tree is returned.

"""

from __future__ import annotations

from pl0dash.config import get_parse_config
from pl0dash.lexer import Lexer
from pl0dash.nodes import SyntaxTree
from pl0dash.parsing import (
    BlockParsingMixin,
    ExpressionParsingMixin,
    StatementParsingMixin,
    TokenNavigationMixin,
)
from pl0dash.tokens import Token
from pl0dash.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    BlockParsingMixin,
    StatementParsingMixin,
    ExpressionParsingMixin,
):
    """Recursive descent parser over a Lexer.

    Usage:
            >>> parser = Parser(Lexer(b"write 1 + 2."))
            >>> tree = parser.parse()
            >>> tree.root.child_kinds()
            (<SyntaxKind.BLOCK: 'block'>, <SyntaxKind.TERMINAL: 'terminal'>)

    Parser instances are single-use: ``parse()`` runs once to completion.
    Configuration (max_depth, allow_trailing_tokens) is read from the
    active ParseConfig when ``parse()`` starts.

    """

    __slots__ = (
        "_lexer",
        "_current",
        "_depth",
        "_max_depth",
        "_token_count",
        "_allow_trailing",
        "_parsed",
    )

    def __init__(self, lexer: Lexer) -> None:
        """Initialize parser over a lexer.

        No token is read until ``parse()`` is called.

        Args:
            lexer: Token source for one source unit
        """
        self._lexer = lexer
        self._current: Token | None = None
        self._depth = 0
        self._max_depth = get_parse_config().max_depth
        self._token_count = 0
        self._allow_trailing = False
        self._parsed = False

    def parse(self) -> SyntaxTree:
        """Parse the whole token stream into a SyntaxTree.

        Returns:
            Tree whose root is the PROGRAM node

        Raises:
            ParseError: Unexpected token, premature end of input, tokens
                after the final period, or nesting beyond max_depth or the
                interpreter recursion limit
            LexError: Propagated unchanged from the lexer
            RuntimeError: The parser was already used
        """
        if self._parsed:
            raise RuntimeError("Parser instances are single-use")
        self._parsed = True

        config = get_parse_config()
        self._max_depth = config.max_depth
        self._allow_trailing = config.allow_trailing_tokens
        source = self._lexer.source_file or "<source>"
        logger.debug("parsing %s (max_depth=%d)", source, self._max_depth)

        self._refill()
        try:
            root = self._parse_program()
        except RecursionError:
            # max_depth above what the interpreter stack can hold
            raise self._nesting_error("nesting exceeds the interpreter recursion limit") from None
        if not self._allow_trailing and not self._at_end():
            raise self._error("end of input")

        logger.debug("parsed %s: %d tokens", source, self._token_count)
        return SyntaxTree(root)
