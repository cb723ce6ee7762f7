"""Parsing subsystem for the pl0dash parser.

Provides mixin classes, one per group of grammar productions:
- `TokenNavigationMixin`: one-token lookahead buffer and matching
- `BlockParsingMixin`: Program, Block and the declarations
- `StatementParsingMixin`: Statement and Condition
- `ExpressionParsingMixin`: Expression, Term and Factor

Example:
    >>> from pl0dash.parsing import (
    ...     TokenNavigationMixin,
    ...     BlockParsingMixin,
    ...     StatementParsingMixin,
    ...     ExpressionParsingMixin,
    ... )
    >>> class Parser(
    ...     TokenNavigationMixin,
    ...     BlockParsingMixin,
    ...     StatementParsingMixin,
    ...     ExpressionParsingMixin,
    ... ):
    ...     pass

"""

from pl0dash.parsing.blocks import BlockParsingMixin
from pl0dash.parsing.expressions import ExpressionParsingMixin
from pl0dash.parsing.protocols import ParserHost
from pl0dash.parsing.statements import StatementParsingMixin
from pl0dash.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "BlockParsingMixin",
    "StatementParsingMixin",
    "ExpressionParsingMixin",
    "ParserHost",
]
