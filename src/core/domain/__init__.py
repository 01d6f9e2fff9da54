"""
Domain models and value objects.

Contains the BigUInt digit store and machine integer bounds.
"""

from src.core.domain.biguint import DIGIT_SEPARATOR, BigUInt, DigitTextError
from src.core.domain.integer_bounds import (
    POWERS_OF_TEN_U64,
    RADIX,
    U32_MAX,
    U64,
    U64_MAX,
    Shift,
    is_u64,
    log10_floor,
    validate_shift,
    validate_u64,
)

__all__ = [
    # Integer bounds
    "RADIX",
    "U32_MAX",
    "U64_MAX",
    "POWERS_OF_TEN_U64",
    "U64",
    "Shift",
    "is_u64",
    "log10_floor",
    "validate_shift",
    "validate_u64",
    # BigUInt model
    "BigUInt",
    "DigitTextError",
    "DIGIT_SEPARATOR",
]
