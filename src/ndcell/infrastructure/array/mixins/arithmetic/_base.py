"""
Arithmetic mixin defining elementwise Array operators.

This module declares :class:`ArrayMixinArithmetic`, the mixin that provides
the public operator surface (``+ - * /``, their reflected forms, and unary
minus) and the shared broadcast/elementwise path behind it.

The mixin itself does not know any scalar arithmetic. Scalar kernels are
registered per operator elsewhere and resolved through
`elementwise_operator`, which keeps the operator switch out of the array
core.
"""

from __future__ import annotations

from abc import ABC
from enum import Enum
from typing import Any

from .....domain._array import ArrayLike, IArray
from ....broadcast._broadcast import broadcast
from ....cells._cell import new_cells
from ..._array_builder import elementwise_operator
from ..._dtypes import infer_dtype


class Operator(str, Enum):
    """Symbols of the elementwise binary operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class ArrayMixinArithmetic(ABC):
    """
    Mixin implementing elementwise arithmetic for cell-backed arrays.

    Notes
    -----
    - Non-array operands (Python scalars, nested lists, NumPy arrays) are
      normalized to arrays by the host's `_as_array_like` before entering the
      shared path.
    - Both operands are broadcast two-sidedly (``lhs_mutable=True``).
    - Every result position receives a fresh cell; results never alias the
      operands.
    - The result dtype is inferred from the computed values, falling back to
      the left operand's dtype for empty results.
    """

    def _elementwise(self: IArray, other: ArrayLike, op: Operator) -> IArray:
        """
        Combine `self` and `other` pointwise with the kernel for `op`.

        Raises
        ------
        BroadcastError
            If the operand shapes cannot be broadcast together.
        UnsupportedOperatorError
            If no kernel is registered for `op`.
        """
        rhs = self._as_array_like(other)
        kernel = elementwise_operator.resolve(op)

        result = broadcast(self.shape, rhs.shape, self.cells, rhs.cells, lhs_mutable=True)
        values = [
            kernel(lcell.read(), rcell.read())
            for lcell, rcell in zip(result.lhs_cells, result.rhs_cells)
        ]
        return type(self)(
            result.shape,
            new_cells(values),
            dtype=infer_dtype(values, default=self.dtype),
        )

    def _reflected(self: IArray, other: ArrayLike, op: Operator) -> IArray:
        """Evaluate ``other <op> self`` for a non-array left operand."""
        return self._as_array_like(other)._elementwise(self, op)

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self, other: ArrayLike) -> IArray:
        """Elementwise ``self + other`` with broadcasting."""
        return self._elementwise(other, Operator.ADD)

    def __radd__(self, other: Any) -> IArray:
        return self._reflected(other, Operator.ADD)

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self, other: ArrayLike) -> IArray:
        """Elementwise ``self - other`` with broadcasting."""
        return self._elementwise(other, Operator.SUB)

    def __rsub__(self, other: Any) -> IArray:
        return self._reflected(other, Operator.SUB)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self, other: ArrayLike) -> IArray:
        """Elementwise ``self * other`` with broadcasting."""
        return self._elementwise(other, Operator.MUL)

    def __rmul__(self, other: Any) -> IArray:
        return self._reflected(other, Operator.MUL)

    # ----------------------------
    # True division
    # ----------------------------
    def __truediv__(self, other: ArrayLike) -> IArray:
        """
        Elementwise ``self / other`` with broadcasting.

        Division by a zero-valued cell follows the element type's own ``/``
        (built-in numbers raise `ZeroDivisionError`).
        """
        return self._elementwise(other, Operator.DIV)

    def __rtruediv__(self, other: Any) -> IArray:
        return self._reflected(other, Operator.DIV)

    # ----------------------------
    # Negation
    # ----------------------------
    def __neg__(self) -> IArray:
        """Unary minus, defined as elementwise multiplication by ``-1``."""
        return self._elementwise(-1, Operator.MUL)

    def __pos__(self) -> IArray:
        return self.astype(self.dtype)
