"""Package-scoped loggers for ctonlex.

Every module logs under the `ctonlex` namespace, so an application can
turn scanner diagnostics on with a single `logging.getLogger("ctonlex")`.
No handlers are installed here.

Example:
    >>> from ctonlex.utils.logger import get_logger
    >>> log = get_logger(__name__)
    >>> log.debug("Scanning source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name` inside the ctonlex namespace.

    Names already under `ctonlex` are used as they are; anything else is
    nested beneath it.

    Args:
        name: Module name, usually __name__

    Example:
        >>> get_logger("lexer.core").name
        'ctonlex.lexer.core'
    """
    if name != "ctonlex" and not name.startswith("ctonlex."):
        name = f"ctonlex.{name}"
    return logging.getLogger(name)
