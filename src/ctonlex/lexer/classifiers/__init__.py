"""Word classifiers for the ctonlex scanner.

Each classifier is a mixin that decodes a scanned word into a typed token,
or returns None so the next classifier can try. Classifiers never move the
scanner's position.
"""

from ctonlex.lexer.classifiers.entity import (
    EntityClassifierMixin,
    split_entity_name,
    trailing_digits,
)
from ctonlex.lexer.classifiers.types import (
    TypeClassifierMixin,
)

__all__ = [
    "EntityClassifierMixin",
    "TypeClassifierMixin",
    "split_entity_name",
    "trailing_digits",
]
