"""Punctuation and comment scanner mixin."""

from ctonlex.location import Location
from ctonlex.tokens import LocatedToken, Token, TokenKind

# Single-character punctuation tokens
PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.LPAR,
    ")": TokenKind.RPAR,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    ":": TokenKind.COLON,
    "=": TokenKind.EQUAL,
}


class PunctuationScannerMixin:
    """Mixin providing punctuation and comment scanning.

    Comments run from `;` to the end of the line. The newline itself is
    left as the lookahead, so it is counted when the next token is scanned.

    """

    # These will be set by the Scanner class
    _lookahead: str | None
    _pos: int

    def _next_ch(self) -> str | None:
        """Advance to the next character."""
        raise NotImplementedError

    def _loc(self) -> Location:
        """Location of the lookahead character."""
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start: int, value: object = None) -> Token:
        """Create token ending at the current position. Implemented by Scanner."""
        raise NotImplementedError

    def rest_of_line(self) -> str:
        """Get the rest of the current line. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_char(self, kind: TokenKind) -> LocatedToken:
        """Scan a single-character token."""
        return self._scan_chars(1, kind)

    def _scan_chars(self, count: int, kind: TokenKind) -> LocatedToken:
        """Scan a token of `count` characters starting at the lookahead."""
        start = self._pos
        loc = self._loc()
        for _ in range(count):
            assert self._lookahead is not None
            self._next_ch()
        return LocatedToken(self._make_token(kind, start), loc)

    def _scan_comment(self) -> LocatedToken:
        """Scan a comment extending to the end of the current line."""
        start = self._pos
        loc = self._loc()
        self.rest_of_line()
        return LocatedToken(self._make_token(TokenKind.COMMENT, start), loc)
