"""
Domain models and value objects.

Contains value objects like FiniteF32 and FiniteF64.
"""

from src.core.domain.finite_float import (
    FiniteF32,
    FiniteF64,
    FiniteFloat,
    FiniteFloatConversionError,
    Ordering,
)
from src.core.math.float_formats import NonFiniteKind

__all__ = [
    # FiniteFloat model
    "FiniteFloat",
    "FiniteF32",
    "FiniteF64",
    "Ordering",
    # Errors
    "FiniteFloatConversionError",
    "NonFiniteKind",
]
