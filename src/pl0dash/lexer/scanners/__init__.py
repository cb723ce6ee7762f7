"""Token scanners for the pl0dash lexer.

Each scanner is a mixin that turns the bytes following an already
classified first byte into one token. The Lexer composes them and owns
the byte cursor they read from.
"""

from __future__ import annotations

from pl0dash.lexer.scanners.comment import CommentScannerMixin
from pl0dash.lexer.scanners.number import NumberScannerMixin
from pl0dash.lexer.scanners.operator import OperatorScannerMixin
from pl0dash.lexer.scanners.word import WordScannerMixin

__all__ = [
    "CommentScannerMixin",
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "WordScannerMixin",
]
