"""
Integers — Arbitrary-Precision Integer Helpers

Python int уже является целым произвольной точности, поэтому модуль не
реализует big-integer арифметику, а только собирает операции, которые
нужны ExactRational:
- Проверка, что значение является настоящим int (bool не считается)
- gcd по абсолютным значениям
- Точное деление (без остатка)
- Приведение пары (n, d) к каноническому виду

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции точные (никаких float-преобразований)
2. reduce_pair возвращает (n, d) с d > 0 и gcd(|n|, d) == 1
"""

import math


def is_strict_int(value: object) -> bool:
    """
    Проверка, что значение является int, но не bool.

    Examples:
        >>> is_strict_int(3)
        True
        >>> is_strict_int(True)
        False
        >>> is_strict_int(3.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def gcd_abs(a: int, b: int) -> int:
    """
    Наибольший общий делитель по абсолютным значениям.

    gcd(0, b) = |b|, gcd(0, 0) = 0.

    Examples:
        >>> gcd_abs(-4, 6)
        2
        >>> gcd_abs(0, -5)
        5
    """
    return math.gcd(a, b)


def exact_divide(value: int, divisor: int) -> int:
    """
    Точное целочисленное деление.

    Args:
        value: Делимое
        divisor: Делитель (должен делить value без остатка)

    Returns:
        value // divisor

    Raises:
        ZeroDivisionError: Если divisor == 0
        ValueError: Если деление не точное
    """
    quotient, remainder = divmod(value, divisor)
    if remainder != 0:
        raise ValueError(f"{divisor} does not divide {value} exactly")

    return quotient


def reduce_pair(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение дроби к несократимому виду с положительным знаменателем.

    Алгоритм:
        g = gcd(|n|, |d|); n, d = n / g, d / g
        если d < 0: n, d = -n, -d

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (ненулевой, любой знак)

    Returns:
        (numerator, denominator) в каноническом виде

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> reduce_pair(2, -4)
        (-1, 2)
        >>> reduce_pair(0, -7)
        (0, 1)
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator must be non-zero")

    divisor = gcd_abs(numerator, denominator)
    numerator = exact_divide(numerator, divisor)
    denominator = exact_divide(denominator, divisor)

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    return numerator, denominator
