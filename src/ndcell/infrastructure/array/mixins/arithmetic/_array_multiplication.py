"""
Scalar kernel for elementwise multiplication.

Registers the ``*`` kernel with `elementwise_operator`; the public entrypoint
is `ArrayMixinArithmetic.__mul__` (and `__rmul__`, `__neg__`).
"""

from typing import Any

from ..._array_builder import elementwise_operator
from ._base import Operator


@elementwise_operator(Operator.MUL)
def scalar_mul(lhs: Any, rhs: Any) -> Any:
    return lhs * rhs
