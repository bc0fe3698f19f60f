"""
Domain value objects.

Contains the DecimalBigNat value type and its construction helpers.
"""

from bignat.core.domain.decimal_nat import (
    BASE,
    MAX_DIGIT,
    ONE,
    ZERO,
    DecimalBigNat,
    InvalidDigit,
    normalize,
    random_nat,
)

__all__ = [
    # Constants
    "BASE",
    "MAX_DIGIT",
    "ONE",
    "ZERO",
    # Value type
    "DecimalBigNat",
    "InvalidDigit",
    # Functions
    "normalize",
    "random_nat",
]
