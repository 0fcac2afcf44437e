"""
Numeric types фиксированной ширины и их algebraic instances.

Модули используются как пространства имён экземпляров:

    from src.core.numeric import complex64 as C

    C.Floating.mul(C.of(1, 2), C.of(3, 4))  # (-5+10i)
"""

from src.core.numeric import complex64, float32, int8, int32, tolerance
from src.core.numeric.complex64 import Complex
from src.core.numeric.float32 import Float
from src.core.numeric.int8 import Int8
from src.core.numeric.int32 import Int

__all__ = [
    # Modules
    "float32",
    "int32",
    "int8",
    "complex64",
    "tolerance",
    # Types
    "Float",
    "Int",
    "Int8",
    "Complex",
]
