"""
Flattening of nested literals into a shape and a cell sequence.

Leaves become fresh cells. Elements that already are arrays contribute their
own cells (the result aliases them), and NumPy arrays contribute fresh cells
holding their values.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable, List, Optional, Tuple

import numpy as np

from .....domain._array import IArray
from .....domain._cell import ICell
from .....domain._errors import RaggedShapeError
from ....cells._cell import new_cell, new_cells


def flatten_literal(
    obj: Any, caster: Optional[Callable[[Any], Any]] = None
) -> Tuple[tuple[int, ...], List[ICell]]:
    """
    Convert a (possibly nested) literal into ``(shape, cells)``.

    Parameters
    ----------
    obj : Any
        A scalar, an array, a NumPy array, or a non-string iterable of those.
    caster : Optional[Callable[[Any], Any]]
        Conversion applied to every fresh leaf value.

    Returns
    -------
    tuple[tuple[int, ...], list[ICell]]
        Row-major shape and cells. An empty iterable yields ``((0,), [])``.

    Raises
    ------
    RaggedShapeError
        If sibling elements have different shapes.
    """
    if isinstance(obj, IArray):
        return obj.shape, list(obj.cells)
    if isinstance(obj, np.ndarray):
        values = obj.ravel().tolist()
        if caster is not None:
            values = [caster(v) for v in values]
        return tuple(obj.shape), new_cells(values)
    if isinstance(obj, (str, bytes)) or not isinstance(obj, Iterable):
        return (), [new_cell(obj if caster is None else caster(obj))]

    shape: Optional[tuple[int, ...]] = None
    cells: List[ICell] = []
    count = 0
    for elt in obj:
        subshape, subcells = flatten_literal(elt, caster)
        if shape is None:
            shape = subshape
        elif subshape != shape:
            raise RaggedShapeError(shape, subshape)
        cells.extend(subcells)
        count += 1

    if shape is None:
        return (0,), []
    return (count, *shape), cells
