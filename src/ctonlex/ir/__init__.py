"""Minimal IR value objects produced by the scanner.

Provides:
- entities: Value (direct and table numbering) and Ebb references
- types: Type with scalar constants and vector construction
"""

from ctonlex.ir.entities import Ebb, Value
from ctonlex.ir.types import (
    B1,
    B8,
    B16,
    B32,
    B64,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    MAX_LANES,
    SCALAR_TYPES,
    Type,
)

__all__ = [
    "B1",
    "B8",
    "B16",
    "B32",
    "B64",
    "Ebb",
    "F32",
    "F64",
    "I8",
    "I16",
    "I32",
    "I64",
    "MAX_LANES",
    "SCALAR_TYPES",
    "Type",
    "Value",
]
