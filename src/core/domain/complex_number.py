"""
FixedComplex — Комплексное число фиксированной точности

Immutable Pydantic модель: пара IEEE-754 double (real, imaginary).
NaN/Inf распространяются по правилам IEEE, нормализации нет.

ФОРМУЛЫ:
    a · b = (a.re·b.re - a.im·b.im) + (a.re·b.im + a.im·b.re)i
    a / b = ((a.re·b.re + a.im·b.im) + (a.im·b.re - a.re·b.im)i) / |b|²,
            |b|² = b.re² + b.im² != 0
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.arithmetic import ArithmeticOperators, DivisionByZero
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_valid_float,
    pair_is_close,
)


class FixedComplex(ArithmeticOperators, BaseModel):
    """
    Комплексное число с компонентами double precision.

    Создание всегда успешно (включая NaN/Inf). int принимается и
    расширяется до float.
    """

    real: float = Field(..., description="Действительная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True, "strict": True}

    def __init__(self, real: float, imaginary: float = 0.0) -> None:
        super().__init__(real=real, imaginary=imaginary)

    @field_validator("real", "imaginary")
    @classmethod
    def as_float(cls, v: float) -> float:
        """int-компоненты хранятся как float."""
        return float(v)

    # -------------------------------------------------------------------------
    # Арифметика (контракт Arithmetic)
    # -------------------------------------------------------------------------

    def add(self, other: "FixedComplex") -> "FixedComplex":
        return FixedComplex(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: "FixedComplex") -> "FixedComplex":
        return FixedComplex(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: "FixedComplex") -> "FixedComplex":
        return FixedComplex(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def divide(self, other: "FixedComplex") -> "FixedComplex":
        """
        Деление a / b через умножение на сопряжённое.

        Raises:
            DivisionByZero: Если |b|² == 0
        """
        denominator = other.abs_squared()
        if denominator == 0:
            raise DivisionByZero("Cannot divide by zero.")

        return FixedComplex(
            (self.real * other.real + self.imaginary * other.imaginary) / denominator,
            (self.imaginary * other.real - self.real * other.imaginary) / denominator,
        )

    # -------------------------------------------------------------------------
    # Дополнительные операции
    # -------------------------------------------------------------------------

    def conjugate(self) -> "FixedComplex":
        return FixedComplex(self.real, -self.imaginary)

    def abs_squared(self) -> float:
        """Квадрат модуля: re² + im²."""
        return self.real * self.real + self.imaginary * self.imaginary

    def is_zero(self) -> bool:
        return self.real == 0 and self.imaginary == 0

    def is_finite(self) -> bool:
        return is_valid_float(self.real) and is_valid_float(self.imaginary)

    def is_close(
        self,
        other: "FixedComplex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с толерантностью.

        Используется вместо == там, где результат прошёл через округление.
        """
        return pair_is_close(
            (self.real, self.imaginary),
            (other.real, other.imaginary),
            rel_tol=rel_tol,
            abs_tol=abs_tol,
        )

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __neg__(self) -> "FixedComplex":
        return FixedComplex(-self.real, -self.imaginary)

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        # Отрицательная мнимая часть не обрабатывается отдельно: "1.0 + -6.0i"
        return f"{self.real} + {self.imaginary}i"
