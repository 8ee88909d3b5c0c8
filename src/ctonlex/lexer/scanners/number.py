"""Numeric literal scanner mixin."""

from ctonlex.location import Location
from ctonlex.tokens import LocatedToken, Token, TokenKind


class NumberScannerMixin:
    """Mixin providing numeric literal scanning.

    Accepts the following forms:

    - `10`, `-10`, `0xff_00`: INTEGER
    - `0.0`, `0x1.f`, `-0x2.4`, `0x0.4p-34`: FLOAT
    - `NaN`, `-Inf`, `sNaN:0x1`, `NaN:0x8000`: FLOAT

    Invalid numbers are not filtered out here. How many digits are allowed
    depends on the type the parser expects, so the literal text is passed
    through unchanged for context-sensitive decoding.

    """

    # These will be set by the Scanner class
    _lookahead: str | None
    _pos: int

    def _next_ch(self) -> str | None:
        """Advance to the next character."""
        raise NotImplementedError

    def _looking_at(self, prefix: str) -> bool:
        """Check whether the source continues with `prefix`."""
        raise NotImplementedError

    def _loc(self) -> Location:
        """Location of the lookahead character."""
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start: int, value: object = None) -> Token:
        """Create token ending at the current position. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_number(self) -> LocatedToken:
        """Scan an integer or floating point literal.

        Returns:
            FLOAT token if a radix point or NaN/Inf was seen, INTEGER otherwise.
        """
        start = self._pos
        loc = self._loc()
        is_float = False

        # Skip a leading sign
        if self._lookahead == "-":
            self._next_ch()

        if self._looking_at("NaN:") or self._looking_at("sNaN:"):
            # Skip through the colon; a hexadecimal payload follows
            while self._lookahead != ":":
                self._next_ch()
            self._next_ch()
            is_float = True
        elif self._looking_at("NaN") or self._looking_at("Inf"):
            # Inf or a default quiet NaN
            is_float = True

        # Find the end of the number, noting any radix point.
        # The character after a sign is tested too, so "- 1" scans as "-" then "1".
        while self._lookahead is not None:
            ch = self._lookahead
            if ch == ".":
                is_float = True
            elif ch != "-" and ch != "_" and not ch.isalnum():
                break
            self._next_ch()

        kind = TokenKind.FLOAT if is_float else TokenKind.INTEGER
        return LocatedToken(self._make_token(kind, start), loc)
