"""Word scanner mixin."""

from ctonlex.lexer.classifiers.entity import split_entity_name
from ctonlex.location import Location
from ctonlex.tokens import LocatedToken, Token, TokenKind


class WordScannerMixin:
    """Mixin providing word scanning.

    A word begins with `_` or an alphabetic character and continues with
    `_` or alphanumeric characters. Words that decode as a numbered entity
    or a type name become typed tokens; all others are identifiers
    (opcodes, enumerators, ...).

    """

    # These will be set by the Scanner class
    _source: str
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

    def _try_classify_entity(self, prefix: str, number: int, start: int) -> Token | None:
        """Implemented by EntityClassifierMixin."""
        raise NotImplementedError

    def _try_classify_type(
        self, text: str, prefix: str, number: int, start: int
    ) -> Token | None:
        """Implemented by TypeClassifierMixin."""
        raise NotImplementedError

    def _scan_word(self) -> LocatedToken:
        """Scan a word and classify it.

        Returns:
            Decoded token, or IDENTIFIER if the word decodes as nothing.
        """
        start = self._pos
        loc = self._loc()

        assert self._lookahead is not None
        assert self._lookahead == "_" or self._lookahead.isalpha()
        ch = self._next_ch()
        while ch is not None and (ch == "_" or ch.isalnum()):
            ch = self._next_ch()

        text = self._source[start : self._pos]
        token = self._classify_word(text, start)
        if token is None:
            token = self._make_token(TokenKind.IDENTIFIER, start)
        return LocatedToken(token, loc)

    def _classify_word(self, text: str, start: int) -> Token | None:
        """Look for numbered entities like `ebb15` and types like `i32x4`."""
        split = split_entity_name(text)
        if split is None:
            return None
        prefix, number = split
        token = self._try_classify_entity(prefix, number, start)
        if token is None:
            token = self._try_classify_type(text, prefix, number, start)
        return token
