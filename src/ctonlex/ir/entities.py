"""Numbered entity references that the scanner resolves sigils into.

Each entity kind has its own numbering limit. Constructors return None
for a number outside the kind's range so that the scanner can fall back
to a plain identifier.

Thread Safety:
All entities are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

# Largest number a u32 entity suffix can carry.
U32_MAX = 0xFFFF_FFFF


@dataclass(frozen=True, slots=True)
class Value:
    """An SSA value reference.

    Values live in one of two disjoint numbering spaces: direct values
    (`v7`) and table values (`vx7`). The same number in the two spaces
    names two different values.

    Attributes:
        number: Index within the numbering space
        table: True for the table space, False for the direct space

    """

    number: int
    table: bool = False

    # Both spaces share one 32-bit encoding, one bit of which selects the space.
    MAX_DIRECT = U32_MAX // 2 - 1
    MAX_TABLE = U32_MAX // 2 - 1

    @classmethod
    def direct_with_number(cls, number: int) -> Value | None:
        """Create a direct value `v<number>`, or None if out of range."""
        if 0 <= number <= cls.MAX_DIRECT:
            return cls(number)
        return None

    @classmethod
    def table_with_number(cls, number: int) -> Value | None:
        """Create a table value `vx<number>`, or None if out of range."""
        if 0 <= number <= cls.MAX_TABLE:
            return cls(number, table=True)
        return None

    def __str__(self) -> str:
        return f"vx{self.number}" if self.table else f"v{self.number}"


@dataclass(frozen=True, slots=True)
class Ebb:
    """An extended basic block label (`ebb<number>`)."""

    number: int

    # U32_MAX itself is reserved as the "no block" marker.
    MAX_NUMBER = U32_MAX - 1

    @classmethod
    def with_number(cls, number: int) -> Ebb | None:
        """Create `ebb<number>`, or None if out of range."""
        if 0 <= number <= cls.MAX_NUMBER:
            return cls(number)
        return None

    def __str__(self) -> str:
        return f"ebb{self.number}"
