"""Byte classification for the lexer.

Maps a raw source byte to the lexical category that selects a tokenizing
rule. Pure lookups, no state.
"""

from __future__ import annotations

from enum import Enum, auto


class CharClass(Enum):
    """Lexical category of a single byte.

    - DIGIT, LETTER: start numbers and words
    - WHITESPACE: skipped between tokens
    - one member per operator/punctuation byte
    - OTHER: every byte that starts no token (including non-ASCII)

    """

    DIGIT = auto()
    LETTER = auto()
    WHITESPACE = auto()
    PLUS = auto()  # +
    MINUS = auto()  # -
    ASTERISK = auto()  # *
    SLASH = auto()  # /
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    EQUAL = auto()  # =
    LESS = auto()  # <
    GREATER = auto()  # >
    COMMA = auto()  # ,
    PERIOD = auto()  # .
    SEMICOLON = auto()  # ;
    COLON = auto()  # :
    OTHER = auto()

    @property
    def is_symbol(self) -> bool:
        """True for operator and punctuation bytes."""
        return self not in _NON_SYMBOL_CLASSES


_NON_SYMBOL_CLASSES = frozenset(
    {CharClass.DIGIT, CharClass.LETTER, CharClass.WHITESPACE, CharClass.OTHER}
)

# Space, tab, newline, carriage return, vertical tab, form feed
WHITESPACE_BYTES = frozenset(b" \t\n\r\x0b\x0c")

_SYMBOL_BYTES: dict[int, CharClass] = {
    ord("+"): CharClass.PLUS,
    ord("-"): CharClass.MINUS,
    ord("*"): CharClass.ASTERISK,
    ord("/"): CharClass.SLASH,
    ord("("): CharClass.LPAREN,
    ord(")"): CharClass.RPAREN,
    ord("="): CharClass.EQUAL,
    ord("<"): CharClass.LESS,
    ord(">"): CharClass.GREATER,
    ord(","): CharClass.COMMA,
    ord("."): CharClass.PERIOD,
    ord(";"): CharClass.SEMICOLON,
    ord(":"): CharClass.COLON,
}


def _build_table() -> tuple[CharClass, ...]:
    table = [CharClass.OTHER] * 256
    for b in range(ord("0"), ord("9") + 1):
        table[b] = CharClass.DIGIT
    for b in range(ord("a"), ord("z") + 1):
        table[b] = CharClass.LETTER
    for b in range(ord("A"), ord("Z") + 1):
        table[b] = CharClass.LETTER
    for b in WHITESPACE_BYTES:
        table[b] = CharClass.WHITESPACE
    for b, cls in _SYMBOL_BYTES.items():
        table[b] = cls
    return tuple(table)


_TABLE = _build_table()


def classify(byte: int) -> CharClass:
    """Return the lexical category of ``byte`` (0-255).

    Examples:
        >>> classify(ord("7"))
        <CharClass.DIGIT: 1>
        >>> classify(ord("<"))
        <CharClass.LESS: 11>
        >>> classify(0xE9)
        <CharClass.OTHER: 17>
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    return _TABLE[byte]


def is_word_byte(byte: int) -> bool:
    """True if ``byte`` may continue an identifier or keyword."""
    cls = classify(byte)
    return cls is CharClass.DIGIT or cls is CharClass.LETTER
