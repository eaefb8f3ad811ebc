"""
Array view, reshape and indexing mixin.

This module defines `ArrayMixinIndexing`, which implements every operation
whose result *aliases* the source cells (subscription, `slice`, `reshape`,
iteration) together with the write-through sugar ``a[key] = value`` and the
materialising `broadcast_to`.

Design notes
------------
- To avoid circular imports the mixin never imports `Array`; views are
  built by the host's `_view(shape, cells)`, which keeps the dtype.
- Selector interpretation lives in `_selectors`; this mixin only adapts the
  Python subscription protocol onto it.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Iterator

from .....domain._array import ArrayLike, IArray
from .....domain._errors import (
    BroadcastError,
    ReshapeError,
    ScalarIndexError,
    UnsizedArrayError,
)
from .....domain.utils._shape import normalize_shape, shape_size
from ....broadcast._broadcast import broadcast
from ..._selectors import apply_selectors, as_selector, as_selectors, expand_ellipsis


class ArrayMixinIndexing(ABC):
    """
    Views and structural operations for the concrete Array implementation.

    Notes
    -----
    - Methods assume the host class provides ``shape``, ``ndim``, ``cells``,
      ``_view(...)`` and ``assign(...)``.
    - Every method except `broadcast_to` returns an array holding the very
      same cell objects as `self` (possibly a subset).
    """

    def __getitem__(self: IArray, key: Any) -> IArray:
        """
        Select a view with Python subscription syntax.

        `key` may be an integer, a `slice`, a selector object, ``...``, or a
        tuple of those (one entry per leading dimension).

        Raises
        ------
        ScalarIndexError
            If `self` is 0-d.
        IndexOutOfBoundsError
            If an integer index is out of range for its dimension.
        TooManyIndicesError
            If more entries than dimensions are given.
        IndexTypeError
            If an entry has an unsupported type.
        """
        if self.ndim == 0 and not (key is Ellipsis or (isinstance(key, tuple) and not key)):
            raise ScalarIndexError()
        selectors = expand_ellipsis(as_selectors(key), self.ndim)
        shape, cells = apply_selectors(self.shape, self.cells, selectors)
        return self._view(shape, cells)

    def __setitem__(self: IArray, key: Any, value: ArrayLike) -> None:
        """Write `value` through the view selected by `key`."""
        self[key].assign(value)

    def slice(self: IArray, *selectors: Any) -> IArray:
        """
        Select a view with one selector per leading dimension.

        Each selector is an integer (drops the dimension), a
        ``(begin, end)`` or ``(begin, end, step)`` tuple, a Python `slice`,
        or an `Index` / `Range` / `Keep` object. Range endpoints are clipped,
        never bounds-checked.

        Examples
        --------
        For ``a = arange(20).reshape(4, 1, 5)``, ``a.slice((1, 4), 0, (2, 5))``
        is the ``(3, 3)`` view holding ``[[7, 8, 9], [12, 13, 14], [17, 18, 19]]``.
        """
        if self.ndim == 0 and selectors:
            raise ScalarIndexError()
        resolved = [as_selector(s) for s in selectors]
        shape, cells = apply_selectors(self.shape, self.cells, resolved)
        return self._view(shape, cells)

    def reshape(self: IArray, *new_shape: Any) -> IArray:
        """
        Return a view of the same cells under a new shape.

        Accepts either one shape argument (``a.reshape((2, 3))``) or the
        dimensions as separate arguments (``a.reshape(2, 3)``). A single
        ``-1`` dimension is inferred from the others.

        Raises
        ------
        ReshapeError
            If the new shape holds a different number of elements.
        """
        if len(new_shape) == 1:
            dims = normalize_shape(new_shape[0])
        else:
            dims = normalize_shape(new_shape)

        if -1 in dims:
            known = shape_size([d for d in dims if d != -1])
            if known == 0 or self.size % known != 0:
                raise ReshapeError(self.size, dims)
            dims = tuple(self.size // known if d == -1 else d for d in dims)

        if shape_size(dims) != self.size:
            raise ReshapeError(self.size, dims)
        return self._view(dims, self.cells)

    def broadcast_to(self: IArray, shape: Any) -> IArray:
        """
        Materialise `self` broadcast to `shape` in fresh cells.

        Unlike views, the result never shares a cell with `self`.

        Raises
        ------
        BroadcastError
            If `self` cannot be stretched to `shape`.
        """
        dims = normalize_shape(shape)
        if -1 in dims:
            raise ValueError(f"negative dimensions are not allowed, got {dims!r}")
        source = self.cells
        result = broadcast(dims, self.shape, (), source, lhs_mutable=False)
        if result.shape != dims:
            raise BroadcastError(dims, self.shape, assignment=True)

        cells = result.rhs_cells
        if cells is source:
            cells = [cell.clone() for cell in cells]
        return self._view(dims, cells)

    def __iter__(self: IArray) -> Iterator[IArray]:
        """Iterate over views along the leading dimension."""
        if self.ndim == 0:
            raise UnsizedArrayError("iteration over a 0-d array")
        return (self[i] for i in range(self.shape[0]))
