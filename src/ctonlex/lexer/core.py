"""Pull-based scanner for `.cton` textual IR.

The scanner holds one lookahead character and hands out one token per
call. It never rewinds: every call consumes at least one character or
reports end-of-input.

Thread Safety:
Scanner instances are single-use and not reentrant. Create one per source
string. All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from ctonlex.errors import ErrorKind, LocatedError
from ctonlex.lexer.classifiers import (
    EntityClassifierMixin,
    TypeClassifierMixin,
)
from ctonlex.lexer.scanners import (
    PUNCTUATION,
    NumberScannerMixin,
    PunctuationScannerMixin,
    WordScannerMixin,
)
from ctonlex.location import Location
from ctonlex.tokens import LocatedToken, Token, TokenKind
from ctonlex.utils.logger import get_logger

logger = get_logger(__name__)

# str.isspace() accepts these separators, but they are not Unicode White_Space
_CONTROL_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(ch: str) -> bool:
    """Check whether `ch` has the Unicode White_Space property."""
    return ch.isspace() and ch not in _CONTROL_SEPARATORS


class Scanner(
    # Classifiers (pure decoding, no position mutation)
    EntityClassifierMixin,
    TypeClassifierMixin,
    # Scanners (consume characters starting at the lookahead)
    PunctuationScannerMixin,
    NumberScannerMixin,
    WordScannerMixin,
):
    """Lexical scanner for `.cton` source text.

    Usage:
            >>> scanner = Scanner("v1 = iadd v0, v0 ; double")
            >>> for item in scanner:
            ...     print(item.token)
        Token(VALUE, v1)
        Token(EQUAL, '=')
        Token(IDENTIFIER, 'iadd')
        Token(VALUE, v0)
        Token(COMMA, ',')
        Token(VALUE, v0)
        Token(COMMENT, '; double')

    Line numbers are counted lazily: the line counter is bumped when the
    character after a newline is fetched, so the location of the current
    lookahead is always right.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",  # Offset of the lookahead character
        "_lookahead",  # None at end of input
        "_line_number",
    )

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: `.cton` source text
        """
        self._source = source
        self._source_len = len(source)
        self._line_number = 1
        # Prime the lookahead with the first character
        self._pos = 0
        self._lookahead: str | None = source[0] if source else None

    def __iter__(self) -> Iterator[LocatedToken | LocatedError]:
        """Yield tokens and errors until the end of the source."""
        while (item := self.next_token()) is not None:
            yield item

    @property
    def line_number(self) -> int:
        """Line number of the lookahead character."""
        return self._line_number

    @property
    def position(self) -> int:
        """Offset of the lookahead character in the source."""
        return self._pos

    def next_token(self) -> LocatedToken | LocatedError | None:
        """Get the next token or a lexical error.

        Returns:
            LocatedToken, LocatedError for a character that starts no token,
            or None at the end of the source.
        """
        while True:
            ch = self._lookahead
            if ch is None:
                return None
            if ch == ";":
                return self._scan_comment()

            kind = PUNCTUATION.get(ch)
            if kind is not None:
                return self._scan_char(kind)

            if ch == "-":
                if self._looking_at("->"):
                    return self._scan_chars(2, TokenKind.ARROW)
                return self._scan_number()
            if "0" <= ch <= "9":
                return self._scan_number()
            if ch.isalpha():
                return self._scan_word()
            if is_whitespace(ch):
                self._next_ch()
                continue

            return self._invalid_char()

    def rest_of_line(self) -> str:
        """Get the rest of the current line.

        The lookahead is left on the newline, so the next token comes from
        the following lines.

        Returns:
            Text from the lookahead up to (excluding) the newline or end.
        """
        start = self._pos
        line_end = self._find_line_end()
        # No newline is crossed, so the line number is unchanged
        self._pos = line_end
        self._lookahead = self._source[line_end] if line_end < self._source_len else None
        return self._source[start:line_end]

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _next_ch(self) -> str | None:
        """Advance to the next character.

        Returns:
            The new lookahead character, or None at the end of input.
        """
        if self._lookahead is None:
            return None
        if self._lookahead == "\n":
            self._line_number += 1

        self._pos += 1
        if self._pos < self._source_len:
            self._lookahead = self._source[self._pos]
        else:
            self._lookahead = None
        return self._lookahead

    def _looking_at(self, prefix: str) -> bool:
        """Check whether the source continues with `prefix` at the lookahead."""
        return self._source.startswith(prefix, self._pos)

    def _find_line_end(self) -> int:
        """Find the end of the current line (position of \\n or EOF).

        Uses str.find for O(n) with low constant factor (C implementation).
        """
        idx = self._source.find("\n", self._pos)
        return idx if idx != -1 else self._source_len

    # =========================================================================
    # Token creation
    # =========================================================================

    def _loc(self) -> Location:
        """Location of the lookahead character."""
        return Location(self._line_number)

    def _make_token(self, kind: TokenKind, start: int, value: object = None) -> Token:
        """Create a Token spanning from `start` to the current position.

        Args:
            kind: The token kind.
            start: Start position in source.
            value: Decoded payload, if any.

        Returns:
            Token referencing the source text, without copying it.
        """
        return Token(
            kind=kind,
            value=value,
            start=start,
            end=self._pos,
            source=self._source,
        )

    def _invalid_char(self) -> LocatedError:
        """Skip the lookahead character and report it as invalid."""
        char = self._lookahead or ""
        offset = self._pos
        loc = self._loc()
        self._next_ch()
        logger.debug("Invalid character %r at %s", char, loc)
        return LocatedError(ErrorKind.INVALID_CHAR, loc, char=char, offset=offset)
