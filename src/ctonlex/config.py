"""ContextVar-based scan configuration for ctonlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The configuration controls the convenience `tokenize()` stream only; the
Scanner itself always behaves the same way.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from ctonlex import tokenize
    from ctonlex.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(skip_comments=True)):
        tokens = list(tokenize(source))

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from ctonlex.errors import ScanConfigError


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        skip_comments: Drop COMMENT tokens from the stream
        strict: Raise InvalidCharError on the first invalid character
            instead of yielding the error value
        source_file: Source file name used in exception messages

    """

    skip_comments: bool = False
    strict: bool = False
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict, *, strict: bool = False) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Unknown keys are silently ignored unless `strict` is set.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.
            strict: Raise ScanConfigError for unknown keys.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "skip_comments": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.skip_comments
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        unknown = sorted(k for k in config_dict if k not in valid_fields)
        if unknown and strict:
            raise ScanConfigError(unknown)
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

# Thread-local configuration via ContextVar
_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Example:
        >>> with scan_config_context(ScanConfig(strict=True)):
        ...     tokens = list(tokenize("v0 = iconst.i32 1"))
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
