"""Scenarios — стандартный набор проверок тождеств.

Четыре прогона: квадрат суммы и разность квадратов для
a = 1/3, b = 1/6 (ExactRational) и a = 1+3i, b = 1+6i (FixedComplex).
Рациональные результаты сравниваются точно, комплексные — с толерантностью.
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.domain import ExactRational, FixedComplex
from src.verification.identities import (
    DifferenceOfSquaresReport,
    SquareOfSumReport,
    verify_difference_of_squares,
    verify_square_of_sum,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ОПЕРАНДЫ ПО УМОЛЧАНИЮ
# =============================================================================

RATIONAL_A: Final[ExactRational] = ExactRational(1, 3)
RATIONAL_B: Final[ExactRational] = ExactRational(1, 6)

COMPLEX_A: Final[FixedComplex] = FixedComplex(1.0, 3.0)
COMPLEX_B: Final[FixedComplex] = FixedComplex(1.0, 6.0)


@dataclass(frozen=True)
class ScenarioResults:
    """Отчёты четырёх стандартных прогонов."""

    rational_square_of_sum: SquareOfSumReport[ExactRational]
    complex_square_of_sum: SquareOfSumReport[FixedComplex]
    rational_difference_of_squares: DifferenceOfSquaresReport[ExactRational]
    complex_difference_of_squares: DifferenceOfSquaresReport[FixedComplex]

    @property
    def all_hold(self) -> bool:
        return all(
            report.holds
            for report in (
                self.rational_square_of_sum,
                self.complex_square_of_sum,
                self.rational_difference_of_squares,
                self.complex_difference_of_squares,
            )
        )


def run_default_scenarios() -> ScenarioResults:
    """Прогон всех стандартных проверок.

    Returns:
        ScenarioResults с четырьмя отчётами
    """
    results = ScenarioResults(
        rational_square_of_sum=verify_square_of_sum(RATIONAL_A, RATIONAL_B),
        complex_square_of_sum=verify_square_of_sum(
            COMPLEX_A, COMPLEX_B, equals=FixedComplex.is_close
        ),
        rational_difference_of_squares=verify_difference_of_squares(RATIONAL_A, RATIONAL_B),
        complex_difference_of_squares=verify_difference_of_squares(
            COMPLEX_A, COMPLEX_B, equals=FixedComplex.is_close
        ),
    )

    logger.info("Default identity scenarios finished, all hold: %s", results.all_hold)
    return results
