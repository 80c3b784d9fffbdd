"""
Numerical Safeguards — Float Comparison Primitives

Модуль содержит примитивы для работы с компонентами FixedComplex
(IEEE-754 double):
- Epsilon-параметры для приближённых сравнений
- Проверка конечности значений (NaN/Inf)
- Сравнения float и пар float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции модуля никогда не изменяют входные значения
2. NaN никогда не считается близким ни к чему (включая NaN)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float
# Используется в is_close и FixedComplex.is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float
# Нужна для сравнений около нуля, где относительная толерантность бесполезна
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм (как в math.isclose):
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Raises:
        ValueError: Если толерантность отрицательная

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.0, 1e-13)
        True
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}")

    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def pair_is_close(
    a: tuple[float, float],
    b: tuple[float, float],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Покомпонентное сравнение двух пар float (например, real/imaginary).

    Args:
        a: Первая пара (x, y)
        b: Вторая пара (x, y)
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если обе компоненты близки
    """
    return is_close(a[0], b[0], rel_tol, abs_tol) and is_close(a[1], b[1], rel_tol, abs_tol)
