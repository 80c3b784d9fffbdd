"""Verification — проверка алгебраических тождеств над контрактом Arithmetic.

- Квадрат суммы: (a + b)² = a² + 2ab + b²
- Разность квадратов: (a² - b²) / (a + b) = a - b
- Стандартные сценарии для ExactRational и FixedComplex
"""

from .identities import (
    DifferenceOfSquaresReport,
    SquareOfSumReport,
    verify_difference_of_squares,
    verify_square_of_sum,
)
from .scenarios import ScenarioResults, run_default_scenarios

__all__ = [
    "DifferenceOfSquaresReport",
    "SquareOfSumReport",
    "verify_difference_of_squares",
    "verify_square_of_sum",
    "ScenarioResults",
    "run_default_scenarios",
]
