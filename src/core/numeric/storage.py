"""
Fixed-Width Storage — одноэлементные numpy-буферы фиксированной ширины

Базовый value object для Float/Int/Int8:
- Буфер — read-only numpy.ndarray формы (1,) с заданным dtype
- Целые при конструировании усекаются к нулю и заворачиваются по модулю 2**bits
- Float при конструировании округляется до single precision (переполнение → ±inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В буфере всегда ровно один элемент нужного dtype
2. Экземпляры неизменяемы: каждая операция создаёт новый экземпляр
3. Логирование никогда не влияет на результат
"""

import logging
import math
import numbers
from decimal import Decimal
from typing import ClassVar, Final

import numpy as np

logger = logging.getLogger(__name__)

# Фиксированная запись при позиции точки в (-6, 21], т.е. 1e-6 <= |x| < 1e21
SHOW_MAX_FIXED_POINT: Final[int] = 21
SHOW_MIN_FIXED_POINT: Final[int] = -6


# =============================================================================
# VALUE OBJECT
# =============================================================================


class FixedWidth:
    """
    Значение фиксированной ширины поверх одноэлементного буфера.

    Подклассы задают DTYPE. Прямое конструирование принимает только
    готовый буфер; числовые конструкторы (of) живут в модулях типов.
    """

    DTYPE: ClassVar[type[np.generic]]

    buffer: np.ndarray

    def __init__(self, buffer: np.ndarray) -> None:
        if not isinstance(buffer, np.ndarray):
            raise ValueError(f"{type(self).__name__} requires numpy.ndarray, got {type(buffer).__name__}")
        if buffer.dtype != self.DTYPE:
            raise ValueError(
                f"{type(self).__name__} requires dtype {np.dtype(self.DTYPE).name}, got {buffer.dtype.name}"
            )
        if buffer.shape != (1,):
            raise ValueError(f"{type(self).__name__} requires exactly one element, got shape {buffer.shape}")

        # Собственная копия, закрытая на запись
        frozen = buffer.copy()
        frozen.flags.writeable = False
        object.__setattr__(self, "buffer", frozen)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> float | int:
        """Хранимое значение как Python-скаляр"""
        return self.buffer[0].item()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self.buffer[0] == other.buffer[0])

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


# =============================================================================
# КОНСТРУИРОВАНИЕ БУФЕРОВ
# =============================================================================


def float32_buffer(value: float) -> np.ndarray:
    """
    Одноэлементный буфер float32 с округлением до single precision.

    Значения за пределами диапазона float32 становятся ±inf без исключения,
    включая целые, не представимые даже в float64.
    """
    try:
        wide = np.array([value], dtype=np.float64)
    except OverflowError:
        wide = np.array([math.inf if value > 0 else -math.inf], dtype=np.float64)
    with np.errstate(over="ignore"):
        buffer = wide.astype(np.float32)
    if not np.isfinite(buffer[0]):
        logger.debug("float32 value %r stored as non-finite %r", value, buffer[0].item())
    return buffer


def wrap_integer(value: float, bits: int) -> int:
    """
    Приведение числа к знаковому целому заданной ширины.

    Алгоритм:
        NaN/Inf → 0
        trunc(value) → wrap в [-2**(bits-1), 2**(bits-1) - 1]

    Examples:
        >>> wrap_integer(127, 8)
        127
        >>> wrap_integer(128, 8)
        -128
        >>> wrap_integer(-3.7, 8)
        -3
    """
    if not isinstance(value, numbers.Integral) and not math.isfinite(value):
        logger.debug("non-finite value %r stored as 0 in int%d", value, bits)
        return 0

    truncated = int(value)
    half = 1 << (bits - 1)
    wrapped = (truncated + half) % (1 << bits) - half
    if wrapped != truncated:
        logger.debug("value %r wrapped to %d in int%d", value, wrapped, bits)
    return wrapped


def integer_buffer(value: float, dtype: type[np.signedinteger]) -> np.ndarray:
    """Одноэлементный целочисленный буфер с wraparound-семантикой"""
    bits = np.dtype(dtype).itemsize * 8
    return np.array([wrap_integer(value, bits)], dtype=dtype)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(value: float | int) -> str:
    """
    Текстовое представление числа по правилам number-to-string.

    - целые значения без дробной части: 1, -2
    - NaN / Infinity / -Infinity
    - фиксированная запись при 1e-6 <= |x| < 1e21: 0.00005, 2.5
    - иначе экспонента без дополнения нулями: 1e-7, 1.5e+25

    Цифры берутся из кратчайшего round-trip repr значения double.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(0.00005)
        '0.00005'
        >>> format_number(1e-7)
        '1e-7'
        >>> format_number(float("-inf"))
        '-Infinity'
    """
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    sign = "-" if value < 0 else ""
    _, raw_digits, exponent = Decimal(repr(abs(float(value)))).as_tuple()
    raw = "".join(map(str, raw_digits))
    # Позиция десятичной точки относительно первой цифры
    point = len(raw) + exponent
    digits = raw.rstrip("0")
    if not digits:
        return "0"
    count = len(digits)

    if count <= point <= SHOW_MAX_FIXED_POINT:
        return sign + digits + "0" * (point - count)
    if 0 < point <= SHOW_MAX_FIXED_POINT:
        return sign + digits[:point] + "." + digits[point:]
    if SHOW_MIN_FIXED_POINT < point <= 0:
        return sign + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
