"""Identities — обобщённая проверка алгебраических тождеств.

Проверки работают с любым типом, удовлетворяющим контракту Arithmetic,
и вызывают только add / subtract / multiply / divide:
- Квадрат суммы: (a + b)² = a² + 2ab + b²
- Разность квадратов: (a² - b²) / (a + b) = a - b

Результат — неизменяемый отчёт со всеми промежуточными значениями.
Промежуточные значения пишутся в лог на уровне DEBUG.
"""

import logging
import operator
from dataclasses import dataclass
from typing import Callable, Generic, Optional

from src.core.domain.arithmetic import DivisionByZero, T, try_divide

logger = logging.getLogger(__name__)

Equality = Callable[[T, T], bool]


@dataclass(frozen=True)
class SquareOfSumReport(Generic[T]):
    """Результат проверки (a+b)² = a² + 2ab + b²."""

    a: T
    b: T

    # Левая часть
    a_plus_b: T
    a_plus_b_squared: T

    # Правая часть
    a_squared: T
    two_ab: T
    b_squared: T
    expanded: T

    holds: bool


@dataclass(frozen=True)
class DifferenceOfSquaresReport(Generic[T]):
    """Результат проверки (a² - b²) / (a + b) = a - b.

    Если a + b — аддитивный ноль, quotient is None, division_error содержит
    DivisionByZero, а holds == False.
    """

    a: T
    b: T

    a_minus_b: T
    a_squared: T
    b_squared: T
    difference_of_squares: T
    a_plus_b: T

    quotient: Optional[T]
    division_error: Optional[DivisionByZero]

    holds: bool

    @property
    def division_failed(self) -> bool:
        return self.division_error is not None


def verify_square_of_sum(
    a: T,
    b: T,
    equals: Equality = operator.eq,
) -> SquareOfSumReport[T]:
    """Проверка (a+b)² = a² + 2ab + b².

    2ab вычисляется как ab + ab, поэтому контракт не требует умножения
    на скаляр.

    Args:
        a: Первый операнд
        b: Второй операнд
        equals: Сравнение левой и правой частей (default: ==).
            Для float-типов передаётся сравнение с толерантностью.

    Returns:
        SquareOfSumReport со всеми промежуточными значениями
    """
    logger.debug("Verifying (a+b)^2 = a^2+2ab+b^2 with a = %s, b = %s", a, b)

    a_plus_b = a.add(b)
    a_plus_b_squared = a_plus_b.multiply(a_plus_b)
    logger.debug("(a + b) = %s", a_plus_b)
    logger.debug("(a+b)^2 = %s", a_plus_b_squared)

    a_squared = a.multiply(a)
    ab = a.multiply(b)
    two_ab = ab.add(ab)
    b_squared = b.multiply(b)
    expanded = a_squared.add(two_ab).add(b_squared)
    logger.debug("a^2 = %s", a_squared)
    logger.debug("2*a*b = %s", two_ab)
    logger.debug("b^2 = %s", b_squared)
    logger.debug("a^2+2ab+b^2 = %s", expanded)

    holds = equals(a_plus_b_squared, expanded)
    logger.debug("(a+b)^2 = a^2+2ab+b^2 holds: %s", holds)

    return SquareOfSumReport(
        a=a,
        b=b,
        a_plus_b=a_plus_b,
        a_plus_b_squared=a_plus_b_squared,
        a_squared=a_squared,
        two_ab=two_ab,
        b_squared=b_squared,
        expanded=expanded,
        holds=holds,
    )


def verify_difference_of_squares(
    a: T,
    b: T,
    equals: Equality = operator.eq,
) -> DifferenceOfSquaresReport[T]:
    """Проверка (a² - b²) / (a + b) = a - b.

    Деление на a + b выполняется через try_divide: при a + b == 0
    проверка не падает, а возвращает отчёт с division_error.

    Args:
        a: Первый операнд
        b: Второй операнд
        equals: Сравнение частного с a - b (default: ==)

    Returns:
        DifferenceOfSquaresReport со всеми промежуточными значениями
    """
    logger.debug("Verifying (a-b) and (a^2-b^2)/(a+b) with a = %s, b = %s", a, b)

    a_minus_b = a.subtract(b)
    a_squared = a.multiply(a)
    b_squared = b.multiply(b)
    difference_of_squares = a_squared.subtract(b_squared)
    a_plus_b = a.add(b)
    logger.debug("(a - b) = %s", a_minus_b)
    logger.debug("a^2 = %s", a_squared)
    logger.debug("b^2 = %s", b_squared)
    logger.debug("(a^2 - b^2) = %s", difference_of_squares)
    logger.debug("(a + b) = %s", a_plus_b)

    outcome = try_divide(difference_of_squares, a_plus_b)

    if outcome.is_ok:
        quotient = outcome.value
        holds = equals(quotient, a_minus_b)
        logger.debug("(a^2 - b^2) / (a + b) = %s", quotient)
        logger.debug("(a^2 - b^2) / (a + b) = (a - b) holds: %s", holds)
    else:
        quotient = None
        holds = False
        logger.warning(
            "Division by zero occurred when calculating (a^2 - b^2) / (a + b) "
            "with a = %s, b = %s",
            a,
            b,
        )

    return DifferenceOfSquaresReport(
        a=a,
        b=b,
        a_minus_b=a_minus_b,
        a_squared=a_squared,
        b_squared=b_squared,
        difference_of_squares=difference_of_squares,
        a_plus_b=a_plus_b,
        quotient=quotient,
        division_error=outcome.error,
        holds=holds,
    )
