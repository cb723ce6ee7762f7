"""Byte-level lexer for pl0dash.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, CharClass, classify
├── core.py              # Lexer class (byte cursor, pushback, dispatch)
├── charclass.py         # Byte -> lexical category
└── scanners/            # Per-category token scanners
    ├── number.py        # Integer literals
    ├── word.py          # Identifiers and keywords
    ├── operator.py      # Symbols, including two-byte operators
    └── comment.py       # /* ... */ comments

Usage:
    >>> from pl0dash.lexer import Lexer
    >>> for token in Lexer(b"a <= 10").tokenize():
    ...     print(token)
Token(IDENTIFIER, 'a', 1:1)
Token(SYMBOL, '<=', 1:3)
Token(NUMBER, '10', 1:6)

"""

from pl0dash.lexer.charclass import CharClass, classify, is_word_byte
from pl0dash.lexer.core import Lexer

__all__ = ["CharClass", "Lexer", "classify", "is_word_byte"]
