"""Numbered entity classifier mixin.

Words like `v12`, `ebb3` or `sig0` are a sigil followed by a canonical
decimal number. Splitting the word is a pure helper; resolving the sigil
is done by the mixin so that the result can be wrapped in a Token.
"""

from __future__ import annotations

from ctonlex.ir.entities import U32_MAX, Ebb, Value
from ctonlex.tokens import Token, TokenKind


def trailing_digits(s: str) -> int:
    """Get the number of ASCII decimal digits at the end of `s`."""
    count = 0
    for ch in reversed(s):
        if not "0" <= ch <= "9":
            break
        count += 1
    return count


def split_entity_name(name: str) -> tuple[str, int] | None:
    """Split a supposed entity name into its prefix and numeric suffix.

    The suffix is the maximal run of trailing decimal digits. It must be
    canonical (no leading zero unless it is exactly "0") and fit in 32 bits.

    Args:
        name: Word to split

    Returns:
        (prefix, number), or None if there is no valid suffix.

    Examples:
        >>> split_entity_name("ebb15")
        ('ebb', 15)
        >>> split_entity_name("inst01") is None
        True
    """
    split = len(name) - trailing_digits(name)
    head, tail = name[:split], name[split:]
    if not tail or (len(tail) > 1 and tail[0] == "0"):
        return None
    number = int(tail)
    if number > U32_MAX:
        return None
    return head, number


class EntityClassifierMixin:
    """Mixin providing numbered entity classification."""

    def _make_token(self, kind: TokenKind, start: int, value: object = None) -> Token:
        """Create token ending at the current position. Implemented by Scanner."""
        raise NotImplementedError

    def _try_classify_entity(self, prefix: str, number: int, start: int) -> Token | None:
        """Try to resolve `prefix` as an entity sigil.

        Args:
            prefix: Word with its numeric suffix removed
            number: The numeric suffix
            start: Position in source where the word starts

        Returns:
            Token if the sigil is known and the number is in range, None otherwise.
        """
        entity: Value | Ebb | int | None
        if prefix == "v":
            kind, entity = TokenKind.VALUE, Value.direct_with_number(number)
        elif prefix == "vx":
            kind, entity = TokenKind.VALUE, Value.table_with_number(number)
        elif prefix == "ebb":
            kind, entity = TokenKind.EBB, Ebb.with_number(number)
        elif prefix in _INDEX_SIGILS:
            kind, entity = _INDEX_SIGILS[prefix], number
        else:
            return None

        if entity is None:
            return None
        return self._make_token(kind, start, entity)


# Sigils whose entities are a bare 32-bit index
_INDEX_SIGILS: dict[str, TokenKind] = {
    "ss": TokenKind.STACK_SLOT,
    "jt": TokenKind.JUMP_TABLE,
    "fn": TokenKind.FUNC_REF,
    "sig": TokenKind.SIG_REF,
}
