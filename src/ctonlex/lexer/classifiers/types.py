"""Value type name classifier mixin."""

from __future__ import annotations

from ctonlex.ir.types import SCALAR_TYPES
from ctonlex.tokens import Token, TokenKind

# Lane counts are 16-bit in the textual format.
MAX_LANE_COUNT = 0xFFFF


class TypeClassifierMixin:
    """Mixin providing scalar and vector type name classification."""

    def _make_token(self, kind: TokenKind, start: int, value: object = None) -> Token:
        """Create token ending at the current position. Implemented by Scanner."""
        raise NotImplementedError

    def _try_classify_type(
        self, text: str, prefix: str, number: int, start: int
    ) -> Token | None:
        """Try to classify a word as a type name.

        Scalar names (`i32`, `b1`, ...) must match the whole word. A prefix
        ending in `x` names a vector: the rest of the prefix is the lane
        type and `number` is the lane count (`i32x4`).

        Args:
            text: The whole word
            prefix: Word with its numeric suffix removed
            number: The numeric suffix
            start: Position in source where the word starts

        Returns:
            TYPE token if the word names a representable type, None otherwise.
        """
        is_vector = prefix.endswith("x")
        base_type = SCALAR_TYPES.get(prefix[:-1] if is_vector else text)
        if base_type is None:
            return None

        if not is_vector:
            return self._make_token(TokenKind.TYPE, start, base_type)
        if number > MAX_LANE_COUNT:
            return None
        vector = base_type.by(number)
        if vector is None:
            return None
        return self._make_token(TokenKind.TYPE, start, vector)
