"""
Broadcast engine for cell-backed arrays.

This module aligns two shapes from their trailing dimension and, where a
dimension of size 1 has to stretch, rewrites that side's cell sequence by
replicating it. Replicas are *clones* (new, independent cells): a later
write to one replicated position must never show up at another.

Two modes are supported through ``lhs_mutable``:

- ``lhs_mutable=True``  : standard two-sided broadcasting, used by the
  elementwise operators; either operand may stretch.
- ``lhs_mutable=False`` : one-sided broadcasting, used by assignment through
  a view; the left-hand (target) shape is fixed and only the right-hand
  source may stretch to fit it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ...domain._cell import ICell
from ...domain._errors import BroadcastError

logger = logging.getLogger(__name__)


@dataclass
class BroadcastResult:
    """
    Outcome of broadcasting two shaped cell sequences.

    Attributes
    ----------
    shape : tuple[int, ...]
        The unified shape.
    lhs_cells : Sequence[ICell]
        Left-hand cells laid out for `shape`. This is the original sequence
        (same cell objects) when the left side needed no rewrite.
    rhs_cells : Sequence[ICell]
        Right-hand cells laid out for `shape`, likewise.
    """

    shape: tuple[int, ...]
    lhs_cells: Sequence[ICell]
    rhs_cells: Sequence[ICell]


def expand_cells(cells: Sequence[ICell], run: int, repeat: int) -> List[ICell]:
    """
    Repeat every contiguous group of `run` cells `repeat` times.

    Each replica is a fresh clone of the source cell, so the returned list
    shares no cell with `cells`.

    Examples
    --------
    Cells holding ``[a, b, c, d]`` with ``run=2, repeat=2`` expand to clones
    holding ``[a, b, a, b, c, d, c, d]``.
    """
    expanded: List[ICell] = []
    if run == 0:
        # zero-size trailing dimensions: nothing to replicate
        return expanded
    for begin in range(0, len(cells), run):
        group = cells[begin : begin + run]
        for _ in range(repeat):
            expanded.extend(cell.clone() for cell in group)
    return expanded


def broadcast(
    lshape: Sequence[int],
    rshape: Sequence[int],
    lcells: Sequence[ICell],
    rcells: Sequence[ICell],
    lhs_mutable: bool,
) -> BroadcastResult:
    """
    Broadcast two shaped cell sequences against each other.

    Parameters
    ----------
    lshape, rshape : Sequence[int]
        Shapes of the left and right operands.
    lcells, rcells : Sequence[ICell]
        Row-major cells of the left and right operands.
    lhs_mutable : bool
        Whether the left side may be stretched. False for assignment, where
        the target shape is fixed.

    Returns
    -------
    BroadcastResult
        Unified shape plus both cell sequences laid out for it.

    Raises
    ------
    BroadcastError
        If a pair of aligned dimensions differs and cannot be reconciled.
        The message names both shapes, phrased for assignment when
        `lhs_mutable` is False.
    """
    lsize, rsize = 1, 1
    unified: List[int] = []

    for i in range(1, max(len(lshape), len(rshape)) + 1):
        ldim = lshape[-i] if i <= len(lshape) else 1
        rdim = rshape[-i] if i <= len(rshape) else 1

        if ldim != rdim:
            if rdim == 1:
                logger.debug(
                    "broadcast: expanding rhs axis -%d from 1 to %d (run=%d)",
                    i,
                    ldim,
                    rsize,
                )
                rdim = ldim
                rcells = expand_cells(rcells, rsize, rdim)
            elif lhs_mutable and ldim == 1:
                logger.debug(
                    "broadcast: expanding lhs axis -%d from 1 to %d (run=%d)",
                    i,
                    rdim,
                    lsize,
                )
                ldim = rdim
                lcells = expand_cells(lcells, lsize, ldim)
            else:
                raise BroadcastError(lshape, rshape, assignment=not lhs_mutable)

        lsize *= ldim
        rsize *= rdim
        unified.append(ldim)

    return BroadcastResult(
        shape=tuple(reversed(unified)),
        lhs_cells=lcells,
        rhs_cells=rcells,
    )
