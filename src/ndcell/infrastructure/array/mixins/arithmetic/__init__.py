"""
Arithmetic mixin and scalar kernels for Array operations.

This package aggregates the arithmetic mixin and the scalar kernels behind
it:

- true division      (``__truediv__`` / ``__rtruediv__``)
- addition           (``__add__`` / ``__radd__``)
- subtraction        (``__sub__`` / ``__rsub__``)
- multiplication     (``__mul__`` / ``__rmul__`` / ``__neg__``)

Kernel modules are imported for their *side effects*: registering with the
elementwise operator registry. They are not part of the public API.

Public API
----------
- ``ArrayMixinArithmetic``
- ``Operator``
"""

from ._array_division import *
from ._array_addition import *
from ._array_subtraction import *
from ._array_multiplication import *
from ._base import ArrayMixinArithmetic, Operator

__all__ = [
    ArrayMixinArithmetic.__name__,
    Operator.__name__,
]
