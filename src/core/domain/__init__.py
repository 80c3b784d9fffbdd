"""
Domain models and value objects.

Contains the numeric value types (ExactRational, FixedComplex) and the
Arithmetic contract they share.
"""

from src.core.domain.arithmetic import (
    Arithmetic,
    ArithmeticOperators,
    ArithmeticOutcome,
    DivisionByZero,
    try_divide,
)
from src.core.domain.complex_number import FixedComplex
from src.core.domain.rational import ExactRational

__all__ = [
    # Arithmetic contract
    "Arithmetic",
    "ArithmeticOperators",
    "ArithmeticOutcome",
    "DivisionByZero",
    "try_divide",
    # Value types
    "ExactRational",
    "FixedComplex",
]
