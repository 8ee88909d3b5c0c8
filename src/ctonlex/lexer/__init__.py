"""Pull-based lexical scanner for `.cton` textual IR.

The scanner turns source text into located tokens one call at a time.
It classifies numbers, type names and numbered entity references, and
leaves every further decision to the parser.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner and the entity helpers
├── core.py              # Scanner class (mixin composition + navigation)
├── classifiers/         # Word decoders (pure, no position mutation)
│   ├── entity.py        # v12, vx3, ebb0, ss1, jt2, fn3, sig4
│   └── types.py         # i32, b1, f64x2
└── scanners/            # Token scanners starting at the lookahead
    ├── punctuation.py   # ( ) { } , . : = -> and ; comments
    ├── number.py        # Integer and float literals
    └── word.py          # Words, decoded or identifiers

Usage:
    >>> from ctonlex.lexer import Scanner
    >>> scanner = Scanner("ebb0(v0: i32):")
    >>> while (item := scanner.next_token()) is not None:
    ...     print(item.token)
Token(EBB, ebb0)
Token(LPAR, '(')
Token(VALUE, v0)
Token(COLON, ':')
Token(TYPE, i32)
Token(RPAR, ')')
Token(COLON, ':')

"""

from ctonlex.lexer.classifiers import split_entity_name, trailing_digits
from ctonlex.lexer.core import Scanner

__all__ = ["Scanner", "split_entity_name", "trailing_digits"]
