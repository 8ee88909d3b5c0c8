"""Token scanners for the ctonlex scanner.

Each scanner is a mixin that scans one family of tokens starting at the
lookahead character (punctuation and comments, numbers, words).
"""

from __future__ import annotations

from ctonlex.lexer.scanners.number import NumberScannerMixin
from ctonlex.lexer.scanners.punctuation import (
    PUNCTUATION,
    PunctuationScannerMixin,
)
from ctonlex.lexer.scanners.word import WordScannerMixin

__all__ = [
    "PUNCTUATION",
    "NumberScannerMixin",
    "PunctuationScannerMixin",
    "WordScannerMixin",
]
