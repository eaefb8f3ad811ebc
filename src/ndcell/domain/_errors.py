"""
Array-related exceptions for ndcell.

This module defines the error types raised by shape, indexing, broadcasting
and conversion operations on cell-backed arrays. Every error subclasses the
built-in exception kind a NumPy user would expect (`IndexError`,
`TypeError`, `ValueError`), so callers may catch either the precise type or
the built-in family.

All errors are raised synchronously at the call that detects them and are
never recovered internally.
"""

from __future__ import annotations

from typing import Sequence

from .utils._shape import format_shape


class IndexOutOfBoundsError(IndexError):
    """
    Raised when an integer index falls outside ``[-dim, dim)``.

    Attributes
    ----------
    index : int
        The index as supplied by the caller (before negative wrapping).
    axis : int
        The dimension the index was applied to.
    size : int
        The size of that dimension.
    """

    def __init__(self, index: int, axis: int, size: int) -> None:
        super().__init__(
            f"index {index} is out of bounds for axis {axis} with size {size}"
        )
        self.index = index
        self.axis = axis
        self.size = size


class TooManyIndicesError(IndexError):
    """
    Raised when more selectors are supplied than the array has dimensions.

    Attributes
    ----------
    ndim : int
        Rank of the indexed array.
    count : int
        Number of selectors supplied.
    """

    def __init__(self, ndim: int, count: int) -> None:
        super().__init__(
            f"too many indices for array: array is {ndim}-dimensional, "
            f"but {count} were indexed"
        )
        self.ndim = ndim
        self.count = count


class ScalarIndexError(IndexError, TypeError):
    """
    Raised when a 0-d array is indexed with an integer.

    A scalar has no dimension to index, which is both an indexing error and a
    type error; the class derives from both so either may be caught.
    """

    def __init__(self) -> None:
        super().__init__("invalid index to scalar variable")


class IndexTypeError(IndexError):
    """Raised when a subscription key is not an int, slice or selector."""

    def __init__(self, key: object) -> None:
        super().__init__(
            "only integers, slices (`:`) and integer pairs are valid indices, "
            f"got {key!r}"
        )
        self.key = key


class ScalarConversionError(TypeError):
    """
    Raised when an array with more (or fewer) than one element is converted
    to a scalar.
    """

    def __init__(self, size: int) -> None:
        super().__init__(
            f"only size-1 arrays can be converted to Python scalars, got size {size}"
        )
        self.size = size


class UnsizedArrayError(TypeError):
    """Raised by ``len()`` and iteration on a 0-d array."""

    def __init__(self, what: str = "len()") -> None:
        super().__init__(f"{what} of unsized object")


class UnsupportedOperatorError(TypeError):
    """
    Raised when an elementwise operator has no registered scalar kernel.

    Attributes
    ----------
    family : str
        Name of the operator registry that was searched.
    symbol : object
        The operator key that could not be resolved.
    """

    def __init__(self, family: str, symbol: object) -> None:
        super().__init__(f"unsupported operator {symbol!r} for {family} operations")
        self.family = family
        self.symbol = symbol


class ReshapeError(ValueError):
    """Raised when a reshape target does not preserve the number of elements."""

    def __init__(self, size: int, shape: Sequence[int]) -> None:
        super().__init__(
            f"cannot reshape array of size {size} into shape {format_shape(shape)}"
        )
        self.size = size
        self.shape = tuple(shape)


class BroadcastError(ValueError):
    """
    Raised when two shapes cannot be broadcast together.

    Attributes
    ----------
    lshape : tuple[int, ...]
        Left-hand (or assignment target) shape.
    rshape : tuple[int, ...]
        Right-hand (or assignment source) shape.
    assignment : bool
        True when the failure came from assignment through a view, where the
        left-hand shape is fixed.
    """

    def __init__(
        self, lshape: Sequence[int], rshape: Sequence[int], *, assignment: bool
    ) -> None:
        if assignment:
            message = (
                f"could not broadcast input array from shape {format_shape(rshape)} "
                f"into shape {format_shape(lshape)}"
            )
        else:
            message = (
                "operands could not be broadcast together with shapes "
                f"{format_shape(lshape)} {format_shape(rshape)}"
            )
        super().__init__(message)
        self.lshape = tuple(lshape)
        self.rshape = tuple(rshape)
        self.assignment = assignment


class RaggedShapeError(ValueError):
    """Raised for a ragged nested literal when strict construction is requested."""

    def __init__(self, expected: Sequence[int], got: Sequence[int]) -> None:
        super().__init__(
            f"array has ragged shape: expecting {format_shape(expected)}, "
            f"got {format_shape(got)}"
        )
        self.expected = tuple(expected)
        self.got = tuple(got)


class RaggedArrayWarning(RuntimeWarning):
    """Emitted when a ragged nested literal degrades to the void array."""
