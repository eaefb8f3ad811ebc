"""
Per-dimension selectors and the view (slice) engine.

A slicing request is an ordered list of selectors, one per leading
dimension:

- `Index(i)`            : pick one position and drop the dimension
- `Range(begin, end)`   : keep the dimension, restricted to ``[begin, end)``
- `Keep()`              : keep the dimension whole

`apply_selectors` interprets the list iteratively from the outermost
dimension inward and returns the selected shape together with the selected
cell *references*. No cell is copied, so the result aliases the source.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

from ...domain._cell import ICell
from ...domain._errors import (
    IndexOutOfBoundsError,
    IndexTypeError,
    TooManyIndicesError,
)
from ...domain.utils._shape import calc_strides, shape_size


@dataclass(frozen=True)
class Index:
    """Select a single position of a dimension, dropping the dimension."""

    index: int

    def resolve(self, dim: int, axis: int = 0) -> int:
        """
        Wrap a negative index once and bounds-check it.

        Raises
        ------
        IndexOutOfBoundsError
            If the index lies outside ``[-dim, dim)``.
        """
        index = self.index
        if index < -dim or index >= dim:
            raise IndexOutOfBoundsError(index, axis, dim)
        return index + dim if index < 0 else index


@dataclass(frozen=True)
class Range:
    """
    Keep a dimension restricted to a half-open range.

    Endpoints wrap negatives once and then clip to ``[0, dim]``; they are
    never bounds-checked. ``None`` endpoints mean "from the start" / "to the
    end", as with Python slices.
    """

    begin: Optional[int] = None
    end: Optional[int] = None
    step: Optional[int] = None

    def resolve(self, dim: int, axis: int = 0) -> range:
        return range(*slice(self.begin, self.end, self.step).indices(dim))


@dataclass(frozen=True)
class Keep:
    """Keep a dimension whole."""

    def resolve(self, dim: int, axis: int = 0) -> range:
        return range(dim)


Selector = Union[Index, Range, Keep]


def _optional_index(value: Any) -> Optional[int]:
    return None if value is None else operator.index(value)


def as_selector(obj: Any) -> Selector:
    """
    Normalize one user-facing selector.

    Accepted forms: a selector object, an integer (`Index`), a Python
    `slice`, or a ``(begin, end)`` / ``(begin, end, step)`` tuple (`Range`).

    Raises
    ------
    IndexTypeError
        If `obj` is none of the accepted forms.
    """
    if isinstance(obj, (Index, Range, Keep)):
        return obj
    if isinstance(obj, slice):
        try:
            return Range(
                _optional_index(obj.start),
                _optional_index(obj.stop),
                _optional_index(obj.step),
            )
        except TypeError:
            raise IndexTypeError(obj) from None
    if isinstance(obj, tuple) and len(obj) in (2, 3):
        try:
            return Range(*(_optional_index(v) for v in obj))
        except TypeError:
            raise IndexTypeError(obj) from None
    if isinstance(obj, bool):
        raise IndexTypeError(obj)
    try:
        return Index(operator.index(obj))
    except TypeError:
        raise IndexTypeError(obj) from None


def as_selectors(key: Any) -> List[Any]:
    """
    Normalize a subscription key (``a[key]``) into a selector list.

    A tuple key supplies one selector per dimension; ``...`` is passed
    through for `expand_ellipsis`.
    """
    items = key if isinstance(key, tuple) else (key,)
    return [item if item is Ellipsis else as_selector(item) for item in items]


def expand_ellipsis(selectors: Sequence[Any], ndim: int) -> List[Selector]:
    """
    Replace a single ``...`` with as many `Keep` selectors as needed.

    Raises
    ------
    IndexError
        If more than one ellipsis is present.
    """
    count = sum(1 for s in selectors if s is Ellipsis)
    if count == 0:
        return list(selectors)
    if count > 1:
        raise IndexError("an index can only have a single ellipsis ('...')")
    at = next(i for i, s in enumerate(selectors) if s is Ellipsis)
    fill = max(0, ndim - (len(selectors) - 1))
    return list(selectors[:at]) + [Keep()] * fill + list(selectors[at + 1 :])


def apply_selectors(
    shape: Sequence[int],
    cells: Sequence[ICell],
    selectors: Sequence[Selector],
) -> Tuple[tuple[int, ...], List[ICell]]:
    """
    Select a sub-array of a shaped cell sequence.

    Parameters
    ----------
    shape : Sequence[int]
        Shape of the source array.
    cells : Sequence[ICell]
        Row-major cells of the source array.
    selectors : Sequence[Selector]
        One selector per leading dimension; trailing dimensions without a
        selector are kept whole.

    Returns
    -------
    tuple[tuple[int, ...], list[ICell]]
        The selected shape and the selected cells (same objects as in
        `cells`, in row-major order of the selected shape).

    Raises
    ------
    TooManyIndicesError
        If there are more selectors than dimensions.
    IndexOutOfBoundsError
        If an `Index` selector is out of range for its dimension.
    """
    if len(selectors) > len(shape):
        raise TooManyIndicesError(len(shape), len(selectors))

    strides = calc_strides(shape)
    offsets = [0]
    new_shape: List[int] = []

    for axis, (dim, stride, selector) in enumerate(zip(shape, strides, selectors)):
        if isinstance(selector, Index):
            position = selector.resolve(dim, axis)
            offsets = [offset + position * stride for offset in offsets]
        else:
            positions = selector.resolve(dim, axis)
            new_shape.append(len(positions))
            offsets = [
                offset + position * stride
                for offset in offsets
                for position in positions
            ]

    rest = tuple(shape[len(selectors) :])
    block = shape_size(rest)
    new_shape.extend(rest)

    selected = [cells[offset + j] for offset in offsets for j in range(block)]
    return tuple(new_shape), selected
