"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source bytes.
Used by tokens, syntax errors and the JSON tree dump.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in its source unit.

    Line and column are 1-indexed and count bytes, not characters.
    Offsets are 0-indexed byte positions; ``end_offset`` is exclusive.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Absolute start offset in the source
        end_offset: Absolute end offset in the source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=7, source_file="gcd.pl0")
            >>> str(loc)
            'gcd.pl0:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.pl0:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source bytes covered."""
        return self.end_offset - self.offset
