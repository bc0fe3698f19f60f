"""
Core math modules для bignat

Арифметические примитивы над DecimalBigNat и стратегии умножения.
"""

# Comparison
from bignat.core.math.comparison import (
    equal,
    less_than,
)

# Shift / Addition / Subtraction
from bignat.core.math.arithmetic import (
    add,
    shift_left,
    subtract,
)

# Multiplication
from bignat.core.math.multiplication import (
    STRATEGIES,
    MultiplicationStrategy,
    get_strategy,
    iterative_addition,
    multiply,
    recursive_fast_multiplication,
    recursive_multiplication,
    standard_multiplication,
)

__all__ = [
    # Comparison
    "equal",
    "less_than",
    # Arithmetic
    "add",
    "shift_left",
    "subtract",
    # Multiplication — Types
    "MultiplicationStrategy",
    "STRATEGIES",
    # Multiplication — Functions
    "get_strategy",
    "iterative_addition",
    "multiply",
    "recursive_fast_multiplication",
    "recursive_multiplication",
    "standard_multiplication",
]
