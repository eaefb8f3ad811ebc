"""
Pure helpers over shapes (sequences of non-negative dimension sizes).

These functions never touch cells; they are shared by the broadcast engine,
the view engine and error formatting.
"""

from __future__ import annotations

import operator
from typing import Sequence, Union

ShapeLike = Union[int, Sequence[int]]


def shape_size(shape: Sequence[int]) -> int:
    """
    Return the number of elements described by `shape`.

    The empty shape describes a scalar and therefore has size 1.
    """
    n = 1
    for dim in shape:
        n *= dim
    return n


def format_shape(shape: Sequence[int]) -> str:
    """Render a shape for diagnostics, e.g. ``(4,1,5,)``."""
    return "(" + "".join(f"{dim}," for dim in shape) + ")"


def calc_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Row-major strides (in cells) for `shape`.

    The last dimension has stride 1; each earlier stride is the product of
    all later dimensions.
    """
    scale = 1
    strides = []
    for dim in reversed(shape):
        strides.append(scale)
        scale *= dim
    return tuple(reversed(strides))


def normalize_shape(shape_like: ShapeLike) -> tuple[int, ...]:
    """
    Convert an int or a sequence of ints into a shape tuple.

    A single ``-1`` entry is kept as a placeholder for reshape inference;
    any other negative entry is rejected.

    Raises
    ------
    TypeError
        If an entry is not an integer.
    ValueError
        If an entry is negative (other than a single -1).
    """
    if isinstance(shape_like, (str, bytes)):
        raise TypeError(f"shape must be an int or a sequence of ints, got {shape_like!r}")
    try:
        dims = (operator.index(shape_like),)
    except TypeError:
        dims = tuple(operator.index(dim) for dim in shape_like)

    if sum(1 for dim in dims if dim == -1) > 1:
        raise ValueError("can only specify one unknown dimension")
    for dim in dims:
        if dim < -1:
            raise ValueError(f"negative dimensions are not allowed, got {dims!r}")
    return dims


def broadcast_shapes(*shapes: Sequence[int]) -> tuple[int, ...]:
    """
    Compute the two-sided broadcast of any number of shapes.

    Raises
    ------
    BroadcastError
        If any pair of aligned dimensions differs and neither is 1.
    """
    from .._errors import BroadcastError

    result: tuple[int, ...] = ()
    for shape in shapes:
        shape = tuple(shape)
        merged = []
        for i in range(1, max(len(result), len(shape)) + 1):
            ldim = result[-i] if i <= len(result) else 1
            rdim = shape[-i] if i <= len(shape) else 1
            if ldim == rdim or rdim == 1:
                merged.append(ldim)
            elif ldim == 1:
                merged.append(rdim)
            else:
                raise BroadcastError(result, shape, assignment=False)
        result = tuple(reversed(merged))
    return result
