"""
Float — 32-битное число с плавающей точкой

Значение хранится в одноэлементном буфере float32. Арифметика выполняется
в double и округляется обратно в single precision при сохранении.

Экземпляры:
- Eq, Ord, Bounded
- Floating (Field + Ord + abs)
- Show
- SemigroupSum, SemigroupProduct, MonoidSum, MonoidProduct

Деление на ноль и прочие особые случаи следуют IEEE-754: результат inf/nan,
исключений нет.
"""

import operator
from typing import Callable, Final

import numpy as np

from src.core.algebra import classes
from src.core.algebra.ordering import Ordering, compare_numbers
from src.core.numeric.storage import FixedWidth, float32_buffer, format_number

# =============================================================================
# BOUNDED LITERALS
# =============================================================================

# Значения сохранены буквально: top отрицателен, а bottom — наименьшее
# положительное нормализованное float32, т.е. top < bottom
FLOAT_TOP: Final[float] = -3.4e38
FLOAT_BOTTOM: Final[float] = 1.2e-38


# =============================================================================
# MODEL
# =============================================================================


class Float(FixedWidth):
    """Single-precision значение"""

    DTYPE = np.float32


def of(value: float) -> Float:
    """
    Упаковка числа во Float с округлением до float32.

    Examples:
        >>> of(1.5)
        Float(1.5)
        >>> of(0.1).value
        0.10000000149011612
    """
    return Float(float32_buffer(value))


def fold(fa: Float) -> float:
    """Извлечение хранимого значения"""
    return fa.value


def map_(f: Callable[[float], float], fa: Float) -> Float:
    """Поднятие функции number -> number до Float -> Float"""
    return of(f(fold(fa)))


def chain(f: Callable[[float], Float], fa: Float) -> Float:
    """Поднятие функции number -> Float до Float -> Float"""
    return f(fold(fa))


def sign(fa: Float) -> Ordering:
    """Положение значения относительно нуля (NaN → EQ)"""
    return compare_numbers(fold(fa), 0)


def _apply(op: Callable[[np.float64, np.float64], np.float64], first: Float, second: Float) -> Float:
    with np.errstate(all="ignore"):
        result = op(np.float64(fold(first)), np.float64(fold(second)))
    return of(result)


# =============================================================================
# INSTANCES
# =============================================================================


class FloatEq(classes.Eq[Float]):
    def equals(self, first: Float, second: Float) -> bool:
        return fold(first) == fold(second)


class FloatOrd(FloatEq, classes.Ord[Float]):
    def compare(self, first: Float, second: Float) -> Ordering:
        return compare_numbers(fold(first), fold(second))


class FloatBounded(FloatOrd, classes.Bounded[Float]):
    top = of(FLOAT_TOP)
    bottom = of(FLOAT_BOTTOM)


class FloatFloating(FloatOrd, classes.Floating[Float]):
    """
    Floating-экземпляр Float.

    mod — остаток с усечением (знак делимого), как fmod.
    """

    zero = of(0)
    one = of(1)

    def add(self, first: Float, second: Float) -> Float:
        return _apply(operator.add, first, second)

    def sub(self, first: Float, second: Float) -> Float:
        return _apply(operator.sub, first, second)

    def mul(self, first: Float, second: Float) -> Float:
        return _apply(operator.mul, first, second)

    def div(self, first: Float, second: Float) -> Float:
        return _apply(operator.truediv, first, second)

    def mod(self, first: Float, second: Float) -> Float:
        return _apply(np.fmod, first, second)

    def abs(self, value: Float) -> Float:
        return map_(abs, value)


class FloatShow(classes.Show[Float]):
    def show(self, value: Float) -> str:
        return format_number(fold(value))


class FloatSemigroupSum(classes.Semigroup[Float]):
    def concat(self, first: Float, second: Float) -> Float:
        return Floating.add(first, second)


class FloatSemigroupProduct(classes.Semigroup[Float]):
    def concat(self, first: Float, second: Float) -> Float:
        return Floating.mul(first, second)


class FloatMonoidSum(FloatSemigroupSum, classes.Monoid[Float]):
    empty = of(0)


class FloatMonoidProduct(FloatSemigroupProduct, classes.Monoid[Float]):
    empty = of(1)


Eq: Final[FloatEq] = FloatEq()
Ord: Final[FloatOrd] = FloatOrd()
Bounded: Final[FloatBounded] = FloatBounded()
Floating: Final[FloatFloating] = FloatFloating()
Show: Final[FloatShow] = FloatShow()
SemigroupSum: Final[FloatSemigroupSum] = FloatSemigroupSum()
SemigroupProduct: Final[FloatSemigroupProduct] = FloatSemigroupProduct()
MonoidSum: Final[FloatMonoidSum] = FloatMonoidSum()
MonoidProduct: Final[FloatMonoidProduct] = FloatMonoidProduct()
