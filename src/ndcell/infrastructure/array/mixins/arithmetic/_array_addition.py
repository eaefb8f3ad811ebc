"""
Scalar kernel for elementwise addition.

Registers the ``+`` kernel with `elementwise_operator`; the public entrypoint
is `ArrayMixinArithmetic.__add__` (and `__radd__`).
"""

from typing import Any

from ..._array_builder import elementwise_operator
from ._base import Operator


@elementwise_operator(Operator.ADD)
def scalar_add(lhs: Any, rhs: Any) -> Any:
    return lhs + rhs
