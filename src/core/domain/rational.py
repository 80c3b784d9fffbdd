"""
ExactRational — Точное рациональное число

Immutable Pydantic модель: пара (numerator, denominator) целых произвольной
точности, всегда хранится в каноническом виде.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (знак хранится только в числителе)
2. gcd(|numerator|, denominator) == 1
3. Ноль представлен как 0/1
4. Каждая операция возвращает новый нормализованный экземпляр

ФОРМУЛЫ:
    a + b = (a.n·b.d + b.n·a.d) / (a.d·b.d)
    a - b = (a.n·b.d - b.n·a.d) / (a.d·b.d)
    a · b = (a.n·b.n) / (a.d·b.d)
    a / b = (a.n·b.d) / (a.d·b.n),  b.n != 0
    cmp(a, b) = sign(a.n·b.d - b.n·a.d)
"""

from functools import total_ordering
from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.domain.arithmetic import ArithmeticOperators, ArithmeticOutcome, DivisionByZero
from src.core.math.integers import is_strict_int, reduce_pair


@total_ordering
class ExactRational(ArithmeticOperators, BaseModel):
    """
    Точное рациональное число.

    Создаётся из произвольной пары (n, d) с d != 0 и сразу нормализуется,
    поэтому равенство полей совпадает с численным равенством.
    """

    numerator: int = Field(..., description="Числитель (несёт знак)")
    denominator: int = Field(..., description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True, "strict": True}

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """
        Приведение к каноническому виду до валидации полей.

        Нецелые значения пропускаются без изменений: их отклонит
        строгая валидация полей.

        Raises:
            DivisionByZero: Если denominator == 0
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator")
        if not (is_strict_int(numerator) and is_strict_int(denominator)):
            return data

        if denominator == 0:
            raise DivisionByZero("Denominator cannot be zero.")

        numerator, denominator = reduce_pair(numerator, denominator)
        return {**data, "numerator": numerator, "denominator": denominator}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "ExactRational":
        """Целое число как дробь value/1."""
        return cls(value, 1)

    @classmethod
    def try_create(cls, numerator: int, denominator: int) -> ArithmeticOutcome["ExactRational"]:
        """
        Создание без исключения для нулевого знаменателя.

        Returns:
            ArithmeticOutcome с дробью или с DivisionByZero
        """
        try:
            return ArithmeticOutcome.ok(cls(numerator, denominator))
        except DivisionByZero as e:
            return ArithmeticOutcome.failure(e)

    # -------------------------------------------------------------------------
    # Арифметика (контракт Arithmetic)
    # -------------------------------------------------------------------------

    def add(self, other: "ExactRational") -> "ExactRational":
        return ExactRational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: "ExactRational") -> "ExactRational":
        return ExactRational(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: "ExactRational") -> "ExactRational":
        return ExactRational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: "ExactRational") -> "ExactRational":
        """
        Деление a / b.

        Raises:
            DivisionByZero: Если other равен нулю
        """
        if other.numerator == 0:
            raise DivisionByZero("Cannot divide by zero.")

        return ExactRational(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    # -------------------------------------------------------------------------
    # Дополнительные операции
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def negate(self) -> "ExactRational":
        return ExactRational(-self.numerator, self.denominator)

    def reciprocal(self) -> "ExactRational":
        """
        Обратная дробь 1 / a.

        Raises:
            DivisionByZero: Если дробь равна нулю
        """
        if self.numerator == 0:
            raise DivisionByZero("Cannot divide by zero.")

        return ExactRational(self.denominator, self.numerator)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: "ExactRational") -> int:
        """
        Полный порядок через перекрёстное умножение.

        Корректно, т.к. оба знаменателя положительны.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        left = self.numerator * other.denominator
        right = other.numerator * self.denominator

        if left < right:
            return -1
        elif left > right:
            return 1
        else:
            return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ExactRational):
            return NotImplemented
        return self.compare_to(other) < 0

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __neg__(self) -> "ExactRational":
        return self.negate()

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

