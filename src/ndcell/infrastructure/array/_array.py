"""
Concrete cell-backed Array implementation.

This module provides `Array`, the concrete implementation of the
domain-level `IArray` protocol. An `Array` is nothing more than a shape and a
row-major sequence of cell references; all behavior is contributed by the
mixins:

- `ArrayMixinArithmetic` : elementwise ``+ - * /`` with broadcasting
- `ArrayMixinIndexing`   : views (subscription, slice, reshape, iteration)
- `ArrayMixinMemory`     : factories and value movement (astype, assign, ...)

Design notes
------------
- Views are produced by `_view`, which reuses the given cell objects and
  keeps the dtype. Nothing else in the package creates aliases.
- The dtype is a recorded element type used to cast writes; it is not
  enforced on values that arrive through aliased cells.
- NumPy interop is explicit (`to_numpy`, `from_numpy`, ``np.asarray``).
  NumPy ufuncs are disabled on arrays so mixed expressions such as
  ``ndarray + Array`` dispatch to the Array's reflected operators.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import numpy as np

from ...domain._array import IArray
from ...domain._cell import ICell
from ...domain._errors import ScalarConversionError, UnsizedArrayError
from ...domain.utils._shape import shape_size
from ._formatting import format_array
from .mixins.arithmetic import ArrayMixinArithmetic
from .mixins.indexing import ArrayMixinIndexing
from .mixins.memory import ArrayMixinMemory


class Array(ArrayMixinArithmetic, ArrayMixinIndexing, ArrayMixinMemory, IArray):
    """
    N-dimensional array whose elements live in individually shared cells.

    Parameters
    ----------
    shape : Iterable[int]
        Array shape. ``()`` describes a 0-d (scalar) array.
    cells : Iterable[ICell]
        Row-major cell references; their count must equal the shape's size.
        The array keeps the given cell objects (it does not copy them).
    dtype : Any, optional
        Element type used to cast values written into the array and by
        `astype`. Defaults to ``float``.

    Raises
    ------
    ValueError
        If the number of cells does not match the shape.

    Notes
    -----
    Prefer the factories (`Array.array`, `Array.full`, `Array.arange`, ...)
    over calling the constructor directly.
    """

    __array_ufunc__ = None

    def __init__(
        self,
        shape: Iterable[int],
        cells: Iterable[ICell],
        *,
        dtype: Any = None,
    ) -> None:
        self._shape = tuple(int(d) for d in shape)
        self._cells = tuple(cells)
        self._dtype = float if dtype is None else dtype
        if len(self._cells) != shape_size(self._shape):
            raise ValueError(
                f"shape {self._shape} requires {shape_size(self._shape)} cells, "
                f"got {len(self._cells)}"
            )

    def _view(self, shape: Iterable[int], cells: Iterable[ICell]) -> "Array":
        """Build an array of the same class and dtype over `cells`."""
        return type(self)(shape, cells, dtype=self._dtype)

    # ----------------------------
    # Structure
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return len(self._cells)

    @property
    def dtype(self) -> Any:
        return self._dtype

    @property
    def cells(self) -> tuple[ICell, ...]:
        """The referenced cells in row-major order (shared, not copied)."""
        return self._cells

    def __len__(self) -> int:
        """
        Return the size of the leading dimension.

        Raises
        ------
        UnsizedArrayError
            If the array is 0-d.
        """
        if not self._shape:
            raise UnsizedArrayError("len()")
        return self._shape[0]

    # ----------------------------
    # Scalar conversion
    # ----------------------------
    def item(self) -> Any:
        """
        Return the single value of a size-1 array.

        Raises
        ------
        ScalarConversionError
            If the array does not hold exactly one element.
        """
        if len(self._cells) != 1:
            raise ScalarConversionError(len(self._cells))
        return self._cells[0].read()

    def __int__(self) -> int:
        return int(self.item())

    def __float__(self) -> float:
        return float(self.item())

    def __complex__(self) -> complex:
        return complex(self.item())

    def __bool__(self) -> bool:
        return bool(self.item())

    # ----------------------------
    # NumPy interop
    # ----------------------------
    def __array__(self, dtype: Optional[Any] = None, copy: Optional[bool] = None) -> np.ndarray:
        out = self.to_numpy()
        return out if dtype is None else out.astype(dtype)

    # ----------------------------
    # Formatting
    # ----------------------------
    def __str__(self) -> str:
        return format_array(self)

    def __repr__(self) -> str:
        return f"array({format_array(self, descr=repr)})"


def shares_cells(a: IArray, b: IArray) -> bool:
    """Return True when `a` and `b` reference at least one common cell."""
    ids = {id(cell) for cell in a.cells}
    return any(id(cell) in ids for cell in b.cells)
