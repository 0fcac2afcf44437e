"""
Int8 — 8-битное знаковое целое

Field-экземпляр для симметрии API: целые не образуют поле, деление
не замкнуто. div усекает частное к нулю, mod — остаток со знаком
делимого. Деление на ноль пробрасывает ZeroDivisionError.
"""

import operator
from typing import Callable, Final

import numpy as np

from src.core.algebra import classes
from src.core.algebra.ordering import Ordering, compare_numbers
from src.core.numeric.storage import FixedWidth, format_number, integer_buffer

INT8_TOP: Final[int] = 127
INT8_BOTTOM: Final[int] = -128


class Int8(FixedWidth):
    """8-битное знаковое целое"""

    DTYPE = np.int8


def of(value: float) -> Int8:
    """
    Упаковка числа в Int8 (усечение к нулю + wraparound).

    Examples:
        >>> of(127)
        Int8(127)
        >>> of(128)
        Int8(-128)
    """
    return Int8(integer_buffer(value, np.int8))


def fold(fa: Int8) -> int:
    """Извлечение хранимого значения"""
    return fa.value


def map_(f: Callable[[int], float], fa: Int8) -> Int8:
    return of(f(fold(fa)))


def chain(f: Callable[[int], Int8], fa: Int8) -> Int8:
    return f(fold(fa))


def truncated_div(dividend: int, divisor: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Examples:
        >>> truncated_div(7, 2)
        3
        >>> truncated_div(-7, 2)
        -3
    """
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def truncated_mod(dividend: int, divisor: int) -> int:
    """Остаток, согласованный с truncated_div (знак делимого)"""
    return dividend - divisor * truncated_div(dividend, divisor)


def _apply(op: Callable[[int, int], int], first: Int8, second: Int8) -> Int8:
    return of(op(fold(first), fold(second)))


class Int8Eq(classes.Eq[Int8]):
    def equals(self, first: Int8, second: Int8) -> bool:
        return fold(first) == fold(second)


class Int8Ord(Int8Eq, classes.Ord[Int8]):
    def compare(self, first: Int8, second: Int8) -> Ordering:
        return compare_numbers(fold(first), fold(second))


class Int8Bounded(Int8Ord, classes.Bounded[Int8]):
    top = of(INT8_TOP)
    bottom = of(INT8_BOTTOM)


class Int8Field(classes.Field[Int8]):
    zero = of(0)
    one = of(1)

    def add(self, first: Int8, second: Int8) -> Int8:
        return _apply(operator.add, first, second)

    def sub(self, first: Int8, second: Int8) -> Int8:
        return _apply(operator.sub, first, second)

    def mul(self, first: Int8, second: Int8) -> Int8:
        return _apply(operator.mul, first, second)

    def div(self, first: Int8, second: Int8) -> Int8:
        return _apply(truncated_div, first, second)

    def mod(self, first: Int8, second: Int8) -> Int8:
        return _apply(truncated_mod, first, second)


class Int8Show(classes.Show[Int8]):
    def show(self, value: Int8) -> str:
        return format_number(fold(value))


class Int8SemigroupSum(classes.Semigroup[Int8]):
    def concat(self, first: Int8, second: Int8) -> Int8:
        return Field.add(first, second)


class Int8SemigroupProduct(classes.Semigroup[Int8]):
    def concat(self, first: Int8, second: Int8) -> Int8:
        return Field.mul(first, second)


class Int8MonoidSum(Int8SemigroupSum, classes.Monoid[Int8]):
    empty = of(0)


class Int8MonoidProduct(Int8SemigroupProduct, classes.Monoid[Int8]):
    empty = of(1)


Eq: Final[Int8Eq] = Int8Eq()
Ord: Final[Int8Ord] = Int8Ord()
Bounded: Final[Int8Bounded] = Int8Bounded()
Field: Final[Int8Field] = Int8Field()
Show: Final[Int8Show] = Int8Show()
SemigroupSum: Final[Int8SemigroupSum] = Int8SemigroupSum()
SemigroupProduct: Final[Int8SemigroupProduct] = Int8SemigroupProduct()
MonoidSum: Final[Int8MonoidSum] = Int8MonoidSum()
MonoidProduct: Final[Int8MonoidProduct] = Int8MonoidProduct()
