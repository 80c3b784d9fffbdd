"""
Arithmetic — Generic Arithmetic Contract

Общий контракт для числовых value-типов (ExactRational, FixedComplex):
- Protocol Arithmetic: add / subtract / multiply / divide, возвращающие тот же тип
- DivisionByZero: единственная ошибка арифметики
- ArithmeticOutcome: результат-значение (успех или DivisionByZero)
- try_divide: деление без исключения, через ArithmeticOutcome
- ArithmeticOperators: mixin, отображающий + - * / на методы контракта

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операции контракта чистые (операнды не изменяются)
2. Единственная ошибка — DivisionByZero, только при делении на аддитивный ноль
3. Обобщённый код вызывает только методы контракта (без проверок типа)
"""

from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Деление на аддитивный ноль.

    Возникает:
    - ExactRational: знаменатель 0 при создании, делитель с числителем 0
    - FixedComplex: делитель 0 + 0i

    Наследует ZeroDivisionError, поэтому ловится и стандартным обработчиком.
    """

    pass


# =============================================================================
# CONTRACT
# =============================================================================


T = TypeVar("T", bound="Arithmetic")


@runtime_checkable
class Arithmetic(Protocol):
    """
    Контракт арифметики над значениями одного типа.

    Тип T удовлетворяет контракту, если реализует четыре операции,
    принимающие и возвращающие T. Наследование не требуется.
    """

    def add(self: T, other: T) -> T: ...

    def subtract(self: T, other: T) -> T: ...

    def multiply(self: T, other: T) -> T: ...

    def divide(self: T, other: T) -> T:
        """Raises DivisionByZero если other — аддитивный ноль."""
        ...


class ArithmeticOperators:
    """
    Mixin: операторы Python поверх методов контракта.

    Смешивание разных типов возвращает NotImplemented (→ TypeError).
    """

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.divide(other)


# =============================================================================
# RESULT TYPE
# =============================================================================


V = TypeVar("V")


@dataclass(frozen=True)
class ArithmeticOutcome(Generic[V]):
    """Результат операции: значение либо DivisionByZero."""

    value: Optional[V] = None
    error: Optional[DivisionByZero] = None

    @classmethod
    def ok(cls, value: V) -> "ArithmeticOutcome[V]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DivisionByZero) -> "ArithmeticOutcome[V]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> V:
        """
        Значение успешного результата.

        Raises:
            DivisionByZero: сохранённая ошибка, если результат неуспешный
        """
        if self.error is not None:
            raise self.error
        return self.value


def try_divide(dividend: T, divisor: T) -> ArithmeticOutcome[T]:
    """
    Деление через контракт без выброса исключения.

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        ArithmeticOutcome.ok(dividend / divisor) или
        ArithmeticOutcome.failure(DivisionByZero)
    """
    try:
        return ArithmeticOutcome.ok(dividend.divide(divisor))
    except DivisionByZero as e:
        return ArithmeticOutcome.failure(e)
