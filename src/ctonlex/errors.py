"""Lexical error values and exception classes for ctonlex.

The scanner reports lexical errors as values (LocatedError) so that a
single bad character never aborts the token stream. The exception classes
are for callers that prefer to stop at the first error, and for
configuration problems.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from ctonlex.location import Location


class ErrorKind(Enum):
    """Kinds of lexical error."""

    INVALID_CHAR = auto()  # Character that starts no token


@dataclass(frozen=True, slots=True)
class LocatedError:
    """An ErrorKind paired with the location of the offending input.

    Attributes:
        kind: The error kind
        location: Where the offending character was found
        char: The offending character (diagnostics only)
        offset: Offset of the offending character (diagnostics only)

    """

    kind: ErrorKind
    location: Location
    char: str = field(default="", compare=False)
    offset: int = field(default=0, compare=False)

    @property
    def line_number(self) -> int:
        return self.location.line_number

    def __str__(self) -> str:
        return f"{self.location}: invalid character {self.char!r}"


class CtonError(Exception):
    """Base exception for all ctonlex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(CtonError):
    """Error during lexical analysis of `.cton` source.

    Raised when a caller asks for errors to be fatal.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            line_number: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.line_number = line_number
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if line_number is not None:
            location += f"{line_number}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class InvalidCharError(LexError):
    """A character that cannot start any token.

    Raised by strict tokenization in place of yielding the error value.
    """

    def __init__(self, error: LocatedError, source_file: str | None = None) -> None:
        """Initialize from the scanner's error value.

        Args:
            error: The LocatedError reported by the scanner
            source_file: Path to source file (optional)
        """
        self.error = error
        super().__init__(
            f"invalid character {error.char!r}",
            line_number=error.line_number,
            source_file=source_file,
        )


class ScanConfigError(CtonError):
    """Invalid scanner configuration.

    Raised when a configuration mapping names unknown options.
    """

    def __init__(self, unknown: list[str]) -> None:
        self.unknown = unknown
        super().__init__(f"Unknown scan config option(s): {', '.join(unknown)}")
