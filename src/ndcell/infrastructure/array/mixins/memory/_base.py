"""
Array construction / memory mixin.

This module defines `ArrayMixinMemory`, the mixin that provides the factory
constructors (array/scalar/arange/full/zeros/ones/from_numpy) and the
value-moving operations (astype/clone/assign/fill/tolist/to_numpy) of a
concrete `Array` that satisfies the domain-level `IArray` protocol.

Design intent
-------------
- Every constructor returns an array owning *fresh* cells, except for
  literals that embed existing arrays: those elements keep their own cells
  so the result aliases them.
- Value-moving operations never change which cells an array references;
  `assign` and `fill` write through the existing cells, while `astype` and
  `clone` produce new arrays with new cells.

Notes
-----
- The mixin assumes the concrete `Array` class provides ``shape``, ``cells``
  and ``dtype`` and accepts ``cls(shape, cells, dtype=...)``.
- New instances are built through ``cls`` / ``type(self)`` so the mixin
  never imports `Array` itself.
"""

from __future__ import annotations

import warnings
from abc import ABC
from typing import Any, Optional, Type

import numpy as np

from .....domain._array import ArrayLike, IArray
from .....domain._errors import RaggedArrayWarning, RaggedShapeError
from .....domain.utils._shape import ShapeLike, normalize_shape, shape_size
from ...._config import get_config
from ....broadcast._broadcast import broadcast
from ....cells._cell import new_cells, read_all
from ..._dtypes import infer_dtype, make_caster, numpy_dtype
from ..._formatting import nest
from ._literal import flatten_literal


class ArrayMixinMemory(ABC):
    """
    Mixin implementing array construction and value movement.

    Provides:

    - Factory constructors: `array`, `scalar`, `arange`, `full`, `zeros`,
      `ones`, `from_numpy`
    - Value conversion: `astype`, `clone`, `tolist`, `to_numpy`
    - In-place writes: `assign`, `fill`
    - Operand normalization for the arithmetic mixin: `_as_array_like`
    """

    # ----------------------------
    # Factories
    # ----------------------------
    @classmethod
    def array(
        cls: Type[IArray],
        values: Any,
        *,
        dtype: Any = None,
        strict: Optional[bool] = None,
    ) -> IArray:
        """
        Build an array from a (possibly nested) literal.

        Parameters
        ----------
        values : Any
            A scalar, a nested sequence of scalars, a NumPy array, an
            existing array, or a sequence mixing arrays of equal shape.
            Array elements are *aliased* (their cells are reused); every
            other leaf gets a fresh cell.
        dtype : Any, optional
            Element type. Fresh leaves are cast to it. When omitted the type
            is inferred from the leaf values.
        strict : Optional[bool], optional
            Whether a ragged literal raises. Defaults to the process-wide
            ``strict_ragged`` setting.

        Returns
        -------
        IArray
            The constructed array. A literal with no elements yields the void
            array of shape ``(0,)``.

        Raises
        ------
        RaggedShapeError
            If siblings of the literal have different shapes and strict mode
            is active. Otherwise a `RaggedArrayWarning` is emitted and the
            void array is returned.
        """
        caster = None if dtype is None else make_caster(dtype)
        try:
            shape, cells = flatten_literal(values, caster)
        except RaggedShapeError as exc:
            if strict is None:
                strict = get_config().strict_ragged
            if strict:
                raise
            warnings.warn(
                f"ragged nested literal; returning an empty array ({exc})",
                RaggedArrayWarning,
                stacklevel=2,
            )
            return cls((0,), [], dtype=float if dtype is None else dtype)

        if dtype is None:
            dtype = infer_dtype(read_all(cells))
        return cls(shape, cells, dtype=dtype)

    @classmethod
    def scalar(cls: Type[IArray], value: Any, *, dtype: Any = None) -> IArray:
        """Build a 0-d array holding `value` in one fresh cell."""
        if dtype is None:
            dtype = type(value)
        else:
            value = make_caster(dtype)(value)
        return cls((), new_cells([value]), dtype=dtype)

    @classmethod
    def arange(cls: Type[IArray], n: int, start: Any = 0) -> IArray:
        """
        Build a 1-d array of `n` consecutive values ``start, start+1, ...``.

        Raises
        ------
        ValueError
            If `n` is negative.
        """
        if n < 0:
            raise ValueError(f"arange length must be non-negative, got {n}")
        values = [start + i for i in range(n)]
        return cls((n,), new_cells(values), dtype=type(start))

    @classmethod
    def full(
        cls: Type[IArray],
        shape: ShapeLike,
        fill_value: Any,
        *,
        dtype: Any = None,
    ) -> IArray:
        """
        Build an array of `shape` with every cell holding `fill_value`.

        Each position receives its own cell.

        Raises
        ------
        ValueError
            If `shape` contains a negative dimension.
        """
        dims = normalize_shape(shape)
        if -1 in dims:
            raise ValueError(f"negative dimensions are not allowed, got {dims!r}")
        if dtype is None:
            dtype = type(fill_value)
        else:
            fill_value = make_caster(dtype)(fill_value)
        return cls(dims, new_cells([fill_value] * shape_size(dims)), dtype=dtype)

    @classmethod
    def zeros(cls: Type[IArray], shape: ShapeLike, *, dtype: Any = float) -> IArray:
        """Build an array of `shape` filled with zeros of `dtype`."""
        return cls.full(shape, 0, dtype=dtype)

    @classmethod
    def ones(cls: Type[IArray], shape: ShapeLike, *, dtype: Any = float) -> IArray:
        """Build an array of `shape` filled with ones of `dtype`."""
        return cls.full(shape, 1, dtype=dtype)

    @classmethod
    def from_numpy(cls: Type[IArray], arr: np.ndarray) -> IArray:
        """
        Copy a NumPy array into a new cell-backed array.

        Values are converted to Python scalars (via ``ndarray.tolist``); the
        result never shares memory with `arr`.
        """
        arr = np.asarray(arr)
        values = arr.ravel().tolist()
        if arr.dtype == object:
            dtype = infer_dtype(values, default=float)
        else:
            # Python counterpart of the NumPy scalar type (float64 -> float)
            dtype = type(np.zeros((), dtype=arr.dtype).item())
        return cls(tuple(arr.shape), new_cells(values), dtype=dtype)

    def _as_array_like(self, x: ArrayLike) -> IArray:
        """Normalize an operand to an array of the host's class."""
        if isinstance(x, IArray):
            return x
        if isinstance(x, np.ndarray):
            return type(self).from_numpy(x)
        if isinstance(x, (list, tuple)):
            return type(self).array(x)
        return type(self).scalar(x)

    # ----------------------------
    # Conversions
    # ----------------------------
    def astype(self: IArray, dtype: Any) -> IArray:
        """
        Return a new array with every value converted to `dtype`.

        The result owns fresh cells; it never aliases `self`, even when
        `dtype` equals the current element type.
        """
        caster = make_caster(dtype)
        values = [caster(v) for v in read_all(self.cells)]
        return type(self)(self.shape, new_cells(values), dtype=dtype)

    def clone(self: IArray) -> IArray:
        """Return a deep copy of `self` with fresh cells and the same dtype."""
        return type(self)(self.shape, [cell.clone() for cell in self.cells], dtype=self.dtype)

    def tolist(self: IArray) -> Any:
        """
        Return the current values as nested Python lists.

        A 0-d array returns its bare value.
        """
        return nest(read_all(self.cells), self.shape)

    def to_numpy(self: IArray) -> np.ndarray:
        """Copy the current values into a new NumPy array of the same shape."""
        values = read_all(self.cells)
        return np.asarray(values, dtype=numpy_dtype(self.dtype)).reshape(self.shape)

    # ----------------------------
    # In-place writes
    # ----------------------------
    def assign(self: IArray, other: ArrayLike) -> IArray:
        """
        Write `other`'s values into this array's cells.

        `other` is broadcast one-sidedly to ``self.shape``: only its
        dimensions may be expanded. All source values are read before any
        cell is written, so overlapping views assign consistently. Written
        values are cast to ``self.dtype``.

        Returns
        -------
        IArray
            `self`, whose cell identities are unchanged.

        Raises
        ------
        BroadcastError
            If `other` cannot be broadcast to ``self.shape``.
        """
        rhs = self._as_array_like(other)
        result = broadcast(
            self.shape, rhs.shape, self.cells, rhs.cells, lhs_mutable=False
        )
        caster = make_caster(self.dtype)
        values = [caster(v) for v in read_all(result.rhs_cells)]
        for cell, value in zip(self.cells, values):
            cell.write(value)
        return self

    def fill(self: IArray, value: Any) -> IArray:
        """Write `value` (cast to ``self.dtype``) into every cell; returns `self`."""
        value = make_caster(self.dtype)(value)
        for cell in self.cells:
            cell.write(value)
        return self
