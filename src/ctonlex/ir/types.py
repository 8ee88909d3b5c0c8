"""Scalar and SIMD vector value types.

A Type is a lane kind (integer, float, or boolean), a lane width in bits,
and a lane count. Scalars have one lane. Vector types are built from a
scalar with `Type.by()`, which refuses lane counts that are not a power
of two or that exceed MAX_LANES.

Thread Safety:
Type is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

# Largest lane count a vector type can have.
MAX_LANES = 256


@dataclass(frozen=True, slots=True)
class Type:
    """A scalar or vector value type.

    Attributes:
        lane_kind: "i" (integer), "f" (float) or "b" (boolean)
        lane_bits: Width of one lane in bits
        lanes: Number of lanes, a power of two (1 for scalars)

    Examples:
            >>> I32.by(4)
            Type(lane_kind='i', lane_bits=32, lanes=4)
            >>> str(I32.by(4))
            'i32x4'

    """

    lane_kind: str
    lane_bits: int
    lanes: int = 1

    @property
    def is_vector(self) -> bool:
        return self.lanes > 1

    @property
    def bits(self) -> int:
        """Total width of the type in bits."""
        return self.lane_bits * self.lanes

    def lane_type(self) -> Type:
        """The scalar type of one lane."""
        return Type(self.lane_kind, self.lane_bits)

    def by(self, n: int) -> Type | None:
        """Get a vector type with `n` times as many lanes as this one.

        Returns None if `n` is not a power of two, or if the result would
        have more than MAX_LANES lanes.
        """
        if n <= 0 or n & (n - 1):
            return None
        lanes = self.lanes * n
        if lanes > MAX_LANES:
            return None
        return Type(self.lane_kind, self.lane_bits, lanes)

    def __str__(self) -> str:
        name = f"{self.lane_kind}{self.lane_bits}"
        if self.lanes > 1:
            return f"{name}x{self.lanes}"
        return name


I8 = Type("i", 8)
I16 = Type("i", 16)
I32 = Type("i", 32)
I64 = Type("i", 64)
F32 = Type("f", 32)
F64 = Type("f", 64)
B1 = Type("b", 1)
B8 = Type("b", 8)
B16 = Type("b", 16)
B32 = Type("b", 32)
B64 = Type("b", 64)

# Scalar types by their textual name
SCALAR_TYPES: dict[str, Type] = {
    str(t): t for t in (I8, I16, I32, I64, F32, F64, B1, B8, B16, B32, B64)
}
