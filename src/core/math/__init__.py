"""
Core math modules

Описание форматов IEEE-754 фиксированной ширины и операции над ними.
"""

# Float Formats
from src.core.math.float_formats import (
    # Formats
    F32,
    F64,
    FloatFormat,
    # Classification
    NonFiniteKind,
)

__all__ = [
    # Float Formats — Formats
    "F32",
    "F64",
    "FloatFormat",
    # Float Formats — Classification
    "NonFiniteKind",
]
