"""
Scalar kernel for elementwise true division.

Registers the ``/`` kernel with `elementwise_operator`; the public entrypoint
is `ArrayMixinArithmetic.__truediv__` (and `__rtruediv__`).

The kernel applies the operands' own ``/`` without special-casing zero
divisors, so built-in numbers raise `ZeroDivisionError` while NumPy scalars
follow NumPy's floating-point rules.
"""

from typing import Any

from ..._array_builder import elementwise_operator
from ._base import Operator


@elementwise_operator(Operator.DIV)
def scalar_div(lhs: Any, rhs: Any) -> Any:
    return lhs / rhs
