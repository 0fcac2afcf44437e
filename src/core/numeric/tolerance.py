"""
Tolerance — сравнения с учётом точности float32

Float и Complex округляют каждую промежуточную операцию до single precision,
поэтому законы поля (ассоциативность, x / x == one) выполняются только
приближённо. Модуль предоставляет Eq-экземпляры, сравнивающие значения
в пределах толерантности.

Алгоритм:
    abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
"""

import math
from typing import Final

import numpy as np

from src.core.algebra import classes
from src.core.numeric import complex64, float32
from src.core.numeric.complex64 import Complex
from src.core.numeric.float32 import Float

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный эпсилон float32 (~1.19e-7)
FLOAT32_EPSILON: Final[float] = float(np.finfo(np.float32).eps)

# Относительная толерантность: несколько ulp single precision
EPS_FLOAT32_COMPARE_REL: Final[float] = 1e-6

# Абсолютная толерантность для значений около нуля
EPS_FLOAT32_COMPARE_ABS: Final[float] = 1e-6


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT32_COMPARE_REL,
    abs_tol: float = EPS_FLOAT32_COMPARE_ABS,
) -> bool:
    """
    Сравнение чисел с толерантностью single precision.

    Examples:
        >>> is_close(0.1, float32.fold(float32.of(0.1)))
        True
        >>> is_close(1.0, 1.001)
        False
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}")
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


class FloatApproxEq(classes.Eq[Float]):
    """Приближённое равенство Float"""

    def __init__(self, rel_tol: float, abs_tol: float) -> None:
        self.rel_tol = rel_tol
        self.abs_tol = abs_tol

    def equals(self, first: Float, second: Float) -> bool:
        return is_close(float32.fold(first), float32.fold(second), self.rel_tol, self.abs_tol)


class ComplexApproxEq(classes.Eq[Complex]):
    """Покомпонентное приближённое равенство Complex"""

    def __init__(self, rel_tol: float, abs_tol: float) -> None:
        self.component = FloatApproxEq(rel_tol, abs_tol)

    def equals(self, first: Complex, second: Complex) -> bool:
        return self.component.equals(complex64.real(first), complex64.real(second)) and self.component.equals(
            complex64.complex_(first), complex64.complex_(second)
        )


def get_float_approx_eq(
    rel_tol: float = EPS_FLOAT32_COMPARE_REL,
    abs_tol: float = EPS_FLOAT32_COMPARE_ABS,
) -> FloatApproxEq:
    return FloatApproxEq(rel_tol, abs_tol)


def get_complex_approx_eq(
    rel_tol: float = EPS_FLOAT32_COMPARE_REL,
    abs_tol: float = EPS_FLOAT32_COMPARE_ABS,
) -> ComplexApproxEq:
    return ComplexApproxEq(rel_tol, abs_tol)
