"""
Тесты для ExactRational

Проверяет:
1. Нормализацию (сокращение, знак, ноль как 0/1)
2. Арифметику и операторы
3. DivisionByZero при создании и делении
4. Полный порядок через перекрёстное умножение
5. Immutability (frozen=True) и валидацию типов
6. Строковое представление
"""

import itertools
import math

import pytest
from pydantic import ValidationError

from src.core.domain import DivisionByZero, ExactRational, FixedComplex


SAMPLE_VALUES = [
    ExactRational(-7, 3),
    ExactRational(-1, 2),
    ExactRational(0, 1),
    ExactRational(1, 6),
    ExactRational(1, 3),
    ExactRational(2, 4),
    ExactRational(5, 1),
    ExactRational(10**30 + 1, 10**30),
]


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


class TestNormalization:
    """Тесты канонического вида"""

    def test_reduced_on_construction(self) -> None:
        """Дробь сокращается при создании"""
        value = ExactRational(9, 18)
        assert value.numerator == 1
        assert value.denominator == 2

    def test_negative_denominator_moves_sign(self) -> None:
        """Знак переносится в числитель"""
        value = ExactRational(3, -6)
        assert value.numerator == -1
        assert value.denominator == 2

    def test_both_negative(self) -> None:
        """Два минуса дают положительную дробь"""
        value = ExactRational(-3, -6)
        assert (value.numerator, value.denominator) == (1, 2)

    def test_zero_is_zero_over_one(self) -> None:
        """Ноль хранится как 0/1 при любом знаменателе"""
        for denominator in (1, 5, -5, 10**20):
            value = ExactRational(0, denominator)
            assert (value.numerator, value.denominator) == (0, 1)

    def test_default_denominator(self) -> None:
        assert ExactRational(4) == ExactRational(4, 1)
        assert ExactRational.from_int(-3) == ExactRational(-3, 1)

    @pytest.mark.parametrize("n", [1, -1, 2, -5, 7, 12])
    @pytest.mark.parametrize("d", [1, -1, 3, -4, 9, 10])
    @pytest.mark.parametrize("k", [1, -1, 2, -3, 10**12])
    def test_scaling_idempotence(self, n: int, d: int, k: int) -> None:
        """ExactRational(k·n, k·d) == ExactRational(n, d)"""
        scaled = ExactRational(k * n, k * d)
        base = ExactRational(n, d)
        assert scaled.numerator == base.numerator
        assert scaled.denominator == base.denominator

    @pytest.mark.parametrize(
        "n, d",
        [(1, 3), (-4, 6), (6, -4), (-10, -25), (0, -3), (10**40, 6 * 10**20), (17, 17)],
    )
    def test_canonical_invariants(self, n: int, d: int) -> None:
        """Знаменатель > 0 и gcd(|n|, d) == 1"""
        value = ExactRational(n, d)
        assert value.denominator > 0
        assert math.gcd(abs(value.numerator), value.denominator) == 1

    def test_big_integers_exact(self) -> None:
        """Большие целые не теряют точность"""
        value = ExactRational(3 * 10**50, 9 * 10**50 + 3)
        assert value.numerator == 10**50
        assert value.denominator == 3 * 10**50 + 1


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты арифметических операций"""

    def test_add(self) -> None:
        """1/3 + 1/6 = 9/18 = 1/2"""
        assert ExactRational(1, 3).add(ExactRational(1, 6)) == ExactRational(1, 2)

    def test_subtract(self) -> None:
        assert ExactRational(1, 3).subtract(ExactRational(1, 6)) == ExactRational(1, 6)
        assert ExactRational(1, 6).subtract(ExactRational(1, 3)) == ExactRational(-1, 6)

    def test_multiply(self) -> None:
        assert ExactRational(2, 3).multiply(ExactRational(9, 4)) == ExactRational(3, 2)
        assert ExactRational(-1, 3).multiply(ExactRational(0, 1)) == ExactRational(0, 1)

    def test_divide(self) -> None:
        assert ExactRational(1, 2).divide(ExactRational(1, 4)) == ExactRational(2, 1)
        assert ExactRational(1, 2).divide(ExactRational(-3, 4)) == ExactRational(-2, 3)

    def test_divide_result_has_positive_denominator(self) -> None:
        """Деление на отрицательную дробь нормализует знак"""
        result = ExactRational(1, 3).divide(ExactRational(-1, 5))
        assert result.denominator > 0
        assert result == ExactRational(-5, 3)

    def test_operations_do_not_mutate_operands(self) -> None:
        a = ExactRational(1, 3)
        b = ExactRational(1, 6)
        a.add(b)
        a.multiply(b)
        a.divide(b)
        assert a == ExactRational(1, 3)
        assert b == ExactRational(1, 6)

    def test_operators(self) -> None:
        a = ExactRational(1, 3)
        b = ExactRational(1, 6)
        assert a + b == ExactRational(1, 2)
        assert a - b == ExactRational(1, 6)
        assert a * b == ExactRational(1, 18)
        assert a / b == ExactRational(2, 1)
        assert -a == ExactRational(-1, 3)

    def test_operators_reject_other_types(self) -> None:
        """Смешивание типов → TypeError"""
        with pytest.raises(TypeError):
            ExactRational(1, 2) + FixedComplex(1.0, 0.0)

        with pytest.raises(TypeError):
            ExactRational(1, 2) * 2

    def test_negate_and_reciprocal(self) -> None:
        assert ExactRational(2, 5).negate() == ExactRational(-2, 5)
        assert ExactRational(-2, 5).reciprocal() == ExactRational(-5, 2)
        assert ExactRational(0, 1).negate() == ExactRational(0, 1)

    def test_is_zero(self) -> None:
        assert ExactRational(0, 9).is_zero()
        assert not ExactRational(1, 9).is_zero()

    def test_float_conversion(self) -> None:
        assert float(ExactRational(1, 4)) == 0.25
        assert float(ExactRational(-1, 3)) == pytest.approx(-1 / 3)

    @pytest.mark.parametrize(
        "a, b",
        [
            (ExactRational(1, 3), ExactRational(1, 6)),
            (ExactRational(-2, 7), ExactRational(5, 3)),
            (ExactRational(0, 1), ExactRational(4, 9)),
            (ExactRational(10**25, 3), ExactRational(-1, 10**25)),
        ],
    )
    def test_field_identities(self, a: ExactRational, b: ExactRational) -> None:
        """(a+b)² = a² + ab + ab + b² и a² - b² = (a-b)(a+b) точно"""
        left = a.add(b).multiply(a.add(b))
        right = a.multiply(a).add(a.multiply(b)).add(a.multiply(b)).add(b.multiply(b))
        assert left == right

        assert a.multiply(a).subtract(b.multiply(b)) == a.subtract(b).multiply(a.add(b))


# =============================================================================
# DIVISION BY ZERO
# =============================================================================


class TestDivisionByZero:
    """Тесты DivisionByZero"""

    def test_zero_denominator_on_construction(self) -> None:
        with pytest.raises(DivisionByZero, match="Denominator cannot be zero"):
            ExactRational(5, 0)

    def test_zero_over_zero_on_construction(self) -> None:
        with pytest.raises(DivisionByZero):
            ExactRational(0, 0)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivisionByZero, match="Cannot divide by zero"):
            ExactRational(1, 1).divide(ExactRational(0, 5))

    def test_divide_operator_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            ExactRational(1, 1) / ExactRational(0, 1)

    def test_reciprocal_of_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            ExactRational(0, 1).reciprocal()

    def test_is_zero_division_error(self) -> None:
        """DivisionByZero ловится как ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            ExactRational(1, 0)

    def test_try_create(self) -> None:
        """try_create возвращает результат вместо исключения"""
        ok = ExactRational.try_create(2, 4)
        assert ok.is_ok
        assert ok.unwrap() == ExactRational(1, 2)

        failed = ExactRational.try_create(5, 0)
        assert not failed.is_ok
        assert failed.value is None
        assert isinstance(failed.error, DivisionByZero)
        with pytest.raises(DivisionByZero):
            failed.unwrap()


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestComparison:
    """Тесты полного порядка"""

    def test_compare_to(self) -> None:
        assert ExactRational(1, 3).compare_to(ExactRational(1, 2)) == -1
        assert ExactRational(1, 2).compare_to(ExactRational(1, 3)) == 1
        assert ExactRational(1, 2).compare_to(ExactRational(2, 4)) == 0

    def test_compare_negative(self) -> None:
        assert ExactRational(-1, 2).compare_to(ExactRational(1, -3)) == -1
        assert ExactRational(0, 1).compare_to(ExactRational(-1, 10**30)) == 1

    def test_rich_comparisons(self) -> None:
        a = ExactRational(1, 3)
        b = ExactRational(1, 2)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a <= ExactRational(2, 6)
        assert a >= ExactRational(2, 6)

    def test_sorting(self) -> None:
        values = [ExactRational(1, 2), ExactRational(-1, 3), ExactRational(1, 6), ExactRational(0, 1)]
        assert sorted(values) == [
            ExactRational(-1, 3),
            ExactRational(0, 1),
            ExactRational(1, 6),
            ExactRational(1, 2),
        ]

    def test_antisymmetry(self) -> None:
        for x, y in itertools.product(SAMPLE_VALUES, repeat=2):
            assert x.compare_to(y) == -y.compare_to(x)
            if x.compare_to(y) == 0:
                assert x == y

    def test_transitivity(self) -> None:
        for x, y, z in itertools.product(SAMPLE_VALUES, repeat=3):
            if x.compare_to(y) <= 0 and y.compare_to(z) <= 0:
                assert x.compare_to(z) <= 0

    def test_matches_real_ordering(self) -> None:
        """Порядок совпадает с порядком вещественных чисел"""
        for x, y in itertools.product(SAMPLE_VALUES, repeat=2):
            expected = (x.numerator * y.denominator > y.numerator * x.denominator) - (
                x.numerator * y.denominator < y.numerator * x.denominator
            )
            assert x.compare_to(y) == expected

    def test_compare_with_other_type_raises(self) -> None:
        with pytest.raises(TypeError):
            ExactRational(1, 2) < 1


# =============================================================================
# IMMUTABILITY И ВАЛИДАЦИЯ
# =============================================================================


class TestModel:
    """Тесты Pydantic модели"""

    def test_frozen(self) -> None:
        """Дробь immutable (frozen=True)"""
        value = ExactRational(1, 2)
        with pytest.raises(ValidationError):
            value.numerator = 3

    def test_hashable_and_canonical(self) -> None:
        """Равные дроби имеют одинаковый hash"""
        assert hash(ExactRational(1, 2)) == hash(ExactRational(2, 4))
        assert len({ExactRational(1, 2), ExactRational(2, 4), ExactRational(-3, -6)}) == 1

    @pytest.mark.parametrize("numerator, denominator", [(1.5, 2), ("1", 2), (True, 2), (1, None)])
    def test_invalid_types_rejected(self, numerator: object, denominator: object) -> None:
        with pytest.raises(ValidationError):
            ExactRational(numerator, denominator)

    def test_model_validate_normalizes(self) -> None:
        """model_validate проходит через ту же нормализацию"""
        value = ExactRational.model_validate({"numerator": 4, "denominator": -8})
        assert value == ExactRational(-1, 2)


# =============================================================================
# ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestToString:
    """Тесты строкового представления"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (ExactRational(1, 3), "1/3"),
            (ExactRational(9, 18), "1/2"),
            (ExactRational(3, -6), "-1/2"),
            (ExactRational(0, 7), "0/1"),
            (ExactRational(5), "5/1"),
        ],
    )
    def test_str(self, value: ExactRational, expected: str) -> None:
        assert str(value) == expected
