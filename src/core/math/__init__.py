"""
Core math modules

Целочисленные и float-примитивы, на которых построены числовые типы.
"""

# Integers (arbitrary precision helpers)
from src.core.math.integers import (
    exact_divide,
    gcd_abs,
    is_strict_int,
    reduce_pair,
)

# Numerical Safeguards (float comparisons)
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    pair_is_close,
)

__all__ = [
    # Integers
    "exact_divide",
    "gcd_abs",
    "is_strict_int",
    "reduce_pair",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_valid_float",
    "pair_is_close",
]
