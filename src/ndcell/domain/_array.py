"""
Array interface definitions.

This module defines the domain-level interface for cell-backed arrays using
structural typing. The protocol mirrors the public surface of the concrete
`Array` implementation so that helpers (formatting, broadcasting, tests) can
type against it without importing the infrastructure layer.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ._cell import ICell


@runtime_checkable
class IArray(Protocol):
    """
    Array interface.

    An `IArray` is a shape plus an ordered, row-major sequence of cell
    references. Views share cell objects with the array they were derived
    from; results of arithmetic and `astype` own fresh cells.
    """

    # ---------------------------------------------------------------------
    # Structure
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the array."""
        ...

    @property
    def ndim(self) -> int:
        """Return the number of dimensions."""
        ...

    @property
    def size(self) -> int:
        """Return the number of elements (cells)."""
        ...

    @property
    def dtype(self) -> Any:
        """Return the element type used for casting written values."""
        ...

    @property
    def cells(self) -> tuple[ICell, ...]:
        """Return the referenced cells in row-major order."""
        ...

    def __len__(self) -> int:
        """Return the size of the leading dimension."""
        ...

    # ---------------------------------------------------------------------
    # Views
    # ---------------------------------------------------------------------
    def __getitem__(self, key: Any) -> "IArray":
        """Return a view selected by `key`."""
        ...

    def slice(self, *selectors: Any) -> "IArray":
        """Return a view selected by per-dimension selectors."""
        ...

    def reshape(self, *new_shape: Any) -> "IArray":
        """Return a view with the same cells under a new shape."""
        ...

    def assign(self, other: Any) -> "IArray":
        """Write `other`'s values into this array's cells."""
        ...

    # ---------------------------------------------------------------------
    # Values
    # ---------------------------------------------------------------------
    def item(self) -> Any:
        """Return the single value of a size-1 array."""
        ...

    def astype(self, dtype: Any) -> "IArray":
        """Return a non-aliasing copy with values cast to `dtype`."""
        ...

    def tolist(self) -> Any:
        """Return the values as nested Python lists."""
        ...

    def to_numpy(self) -> Any:
        """Return the values as a NumPy ndarray."""
        ...


ArrayLike = Any
"""Anything accepted where an array operand is expected (array, scalar,
nested sequence or NumPy array)."""

