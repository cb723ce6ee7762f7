"""Token definitions for the pl0dash lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token is a tagged value (keyword, symbol, identifier or number) plus
the position of its first byte.

Token stores raw coordinates and lazily creates SourceLocation on demand,
since most token locations are only read when an error is reported.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pl0dash.location import SourceLocation


class TokenType(Enum):
    """The four token kinds of the language."""

    KEYWORD = auto()
    SYMBOL = auto()
    IDENTIFIER = auto()
    NUMBER = auto()

    @property
    def tag(self) -> str:
        """Element name used by the XML emitter."""
        return self.name.lower()


class Keyword(Enum):
    """Reserved words. Values are the exact source spelling."""

    BEGIN = "begin"
    END = "end"
    IF = "if"
    THEN = "then"
    WHILE = "while"
    DO = "do"
    RETURN = "return"
    FUNCTION = "function"
    VAR = "var"
    CONST = "const"
    ODD = "odd"
    WRITE = "write"
    WRITELN = "writeln"

    @classmethod
    def lookup(cls, word: str) -> Keyword | None:
        """Return the keyword spelled ``word``, or None for an identifier."""
        return _KEYWORDS.get(word)


class Symbol(Enum):
    """Operators and punctuation. Values are the source glyphs."""

    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    DIV = "/"
    LPAREN = "("
    RPAREN = ")"
    EQUAL = "="
    LESS = "<"
    GREATER = ">"
    NOT_EQUAL = "<>"
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="
    COMMA = ","
    PERIOD = "."
    SEMICOLON = ";"
    ASSIGN = ":="

    @classmethod
    def lookup(cls, text: str) -> Symbol | None:
        """Return the symbol spelled ``text``, or None."""
        return _SYMBOLS.get(text)


_KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}
_SYMBOLS: dict[str, Symbol] = {sym.value: sym for sym in Symbol}

RELATIONAL_OPERATORS = frozenset(
    {
        Symbol.EQUAL,
        Symbol.NOT_EQUAL,
        Symbol.LESS,
        Symbol.LESS_EQUAL,
        Symbol.GREATER,
        Symbol.GREATER_EQUAL,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token kind
        value: ``Keyword`` for keywords, ``Symbol`` for symbols, the verbatim
            text for identifiers and the decimal value for numbers
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _source_file: Optional source file path

    """

    type: TokenType
    value: Keyword | Symbol | str | int
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @classmethod
    def keyword(cls, kw: Keyword, **coords: Any) -> Token:
        return cls(TokenType.KEYWORD, kw, **coords)

    @classmethod
    def symbol(cls, sym: Symbol, **coords: Any) -> Token:
        return cls(TokenType.SYMBOL, sym, **coords)

    @classmethod
    def identifier(cls, name: str, **coords: Any) -> Token:
        return cls(TokenType.IDENTIFIER, name, **coords)

    @classmethod
    def number(cls, value: int, **coords: Any) -> Token:
        return cls(TokenType.NUMBER, value, **coords)

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from pl0dash.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        # Idempotent write into the frozen instance
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self._col

    @property
    def literal(self) -> str:
        """Text written for this token by the emitters.

        Decimal digits for numbers, verbatim text for identifiers and
        keywords, the operator glyph for symbols.
        """
        if isinstance(self.value, (Keyword, Symbol)):
            return self.value.value
        return str(self.value)

    def is_keyword(self, kw: Keyword) -> bool:
        return self.type is TokenType.KEYWORD and self.value is kw

    def is_symbol(self, *symbols: Symbol) -> bool:
        return self.type is TokenType.SYMBOL and self.value in symbols

    def describe(self) -> str:
        """Human-readable description used in error messages."""
        if self.type is TokenType.NUMBER:
            return f"number {self.value}"
        return f"{self.type.tag} {self.literal!r}"

    def same_kind(self, other: Token) -> bool:
        """True if both tokens have the same type and value, ignoring position."""
        return self.type is other.type and self.value == other.value

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, {self._lineno}:{self._col})"


def describe_token(token: Token | None) -> str:
    """Describe ``token`` for an error message; None means end of input."""
    if token is None:
        return "end of input"
    return token.describe()
