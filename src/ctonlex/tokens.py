"""Token and TokenKind definitions for the ctonlex scanner.

The scanner produces one located token per step, which the parser consumes
immediately. Each Token has a kind, an optional decoded payload, and the
offsets of its text in the source.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token keeps a reference to the source plus start/end offsets and slices
its text on demand. Scanning never copies token text.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

from ctonlex.location import Location

if TYPE_CHECKING:
    from ctonlex.ir.entities import Ebb, Value
    from ctonlex.ir.types import Type

    Payload = Union[Type, Value, Ebb, int, None]


class TokenKind(Enum):
    """Token kinds produced by the scanner.

    Organized by category:
    - Comments
    - Punctuation
    - Numeric literals (raw text)
    - Decoded words (types and numbered entities)
    - Fallback identifiers

    """

    # Comments
    COMMENT = auto()  # ; to end of line

    # Punctuation
    LPAR = auto()  # (
    RPAR = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    COLON = auto()  # :
    EQUAL = auto()  # =
    ARROW = auto()  # ->

    # Numeric literals
    FLOAT = auto()  # 0.0, 0x1.f, -0x0.4p-34, NaN, sNaN:0x1, Inf
    INTEGER = auto()  # 10, -10, 0xff_00

    # Decoded words
    TYPE = auto()  # i32, f32, b32x4, ...
    VALUE = auto()  # v12, vx7
    EBB = auto()  # ebb3
    STACK_SLOT = auto()  # ss3
    JUMP_TABLE = auto()  # jt2
    FUNC_REF = auto()  # fn2
    SIG_REF = auto()  # sig2

    # Unrecognized word (opcode, enumerator, ...)
    IDENTIFIER = auto()


# Kinds whose meaning is fully carried by their source text
TEXT_KINDS = frozenset(
    {
        TokenKind.COMMENT,
        TokenKind.FLOAT,
        TokenKind.INTEGER,
        TokenKind.IDENTIFIER,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: The token kind (from TokenKind enum)
        value: Decoded payload for TYPE, VALUE, EBB and the indexed
            reference kinds; None otherwise
        start: Start offset of the token text in source
        end: End offset (exclusive) of the token text in source
        source: The scanned source, retained so text can be sliced lazily

    """

    kind: TokenKind
    value: Payload = None
    start: int = 0
    end: int = 0
    # Retained source - excluded from repr and comparison
    source: str = field(default="", repr=False, compare=False)

    @property
    def text(self) -> str:
        """Raw source text of this token."""
        return self.source[self.start : self.end]

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.value is not None:
            return f"Token({self.kind.name}, {self.value})"
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.kind.name}, {text!r})"


@dataclass(frozen=True, slots=True)
class LocatedToken:
    """A Token paired with the location where it starts."""

    token: Token
    location: Location

    @property
    def kind(self) -> TokenKind:
        return self.token.kind

    @property
    def text(self) -> str:
        return self.token.text

    @property
    def value(self) -> Payload:
        return self.token.value

    @property
    def line_number(self) -> int:
        return self.location.line_number
