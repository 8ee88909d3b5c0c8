"""Source location tracking for tokens and lexical errors.

Only the line number is tracked. Columns are not needed by the `.cton`
parser, which reports every diagnostic against a line.

Thread Safety:
Location is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Position of a token or error in the source text.

    Attributes:
        line_number: Line number (1-indexed)

    Examples:
            >>> loc = Location(3)
            >>> str(loc)
            'line 3'

    """

    line_number: int

    def __str__(self) -> str:
        return f"line {self.line_number}"
