"""
Scalar kernel for elementwise subtraction.

Registers the ``-`` kernel with `elementwise_operator`; the public entrypoint
is `ArrayMixinArithmetic.__sub__` (and `__rsub__`).
"""

from typing import Any

from ..._array_builder import elementwise_operator
from ._base import Operator


@elementwise_operator(Operator.SUB)
def scalar_sub(lhs: Any, rhs: Any) -> Any:
    return lhs - rhs
