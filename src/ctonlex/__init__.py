"""
ctonlex — Lexical scanner for `.cton` textual compiler IR

Converts `.cton` source text into a stream of classified tokens with line
numbers, ready for a parser. Numbers are passed through as raw text, type
names and numbered entities (`v0`, `ebb3`, `ss1`, ...) are decoded, and
anything unrecognized becomes an identifier.

Quick Start:
    >>> from ctonlex import Scanner
    >>> scanner = Scanner("v1 = iconst.i32 42")
    >>> [item.kind.name for item in scanner]
    ['VALUE', 'EQUAL', 'IDENTIFIER', 'DOT', 'TYPE', 'INTEGER']

    >>> # Or use the configurable stream
    >>> from ctonlex import ScanConfig, tokenize
    >>> tokens = list(tokenize(source, ScanConfig(skip_comments=True)))

Installation:
    pip install ctonlex              # Zero runtime dependencies
"""

from collections.abc import Iterator

from ctonlex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from ctonlex.errors import (
    CtonError,
    ErrorKind,
    InvalidCharError,
    LexError,
    LocatedError,
    ScanConfigError,
)
from ctonlex.ir import Ebb, Type, Value
from ctonlex.lexer import Scanner, split_entity_name, trailing_digits
from ctonlex.location import Location
from ctonlex.tokens import LocatedToken, Token, TokenKind
from ctonlex.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(
    source: str, config: ScanConfig | None = None
) -> Iterator[LocatedToken | LocatedError]:
    """Scan `source` and yield every token and lexical error.

    Args:
        source: `.cton` source text
        config: Scan configuration (default: the context's ScanConfig)

    Yields:
        LocatedToken and LocatedError items in source order.

    Raises:
        InvalidCharError: On the first invalid character, if config.strict.
    """
    if config is None:
        config = get_scan_config()

    tokens = 0
    errors = 0
    for item in Scanner(source):
        if isinstance(item, LocatedError):
            if config.strict:
                raise InvalidCharError(item, source_file=config.source_file)
            errors += 1
        elif config.skip_comments and item.kind is TokenKind.COMMENT:
            continue
        else:
            tokens += 1
        yield item

    logger.debug(
        "Scanned %s: %d tokens, %d errors",
        config.source_file or "<source>",
        tokens,
        errors,
    )


__all__ = [
    "__version__",
    # Scanning
    "Scanner",
    "tokenize",
    "split_entity_name",
    "trailing_digits",
    # Tokens
    "LocatedToken",
    "Location",
    "Token",
    "TokenKind",
    # IR values
    "Ebb",
    "Type",
    "Value",
    # Errors
    "CtonError",
    "ErrorKind",
    "InvalidCharError",
    "LexError",
    "LocatedError",
    "ScanConfigError",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
