"""
Cell store: independently owned, shareable scalar cells.

Arrays never store values directly. They store references to `Cell` objects,
and a view is simply another list of references to the same cells. Python's
reference counting reclaims a cell once no array refers to it.

Two cell flavours are provided:

- `Cell`       : a plain slot, for single-threaded use (the default)
- `LockedCell` : a slot whose reads and writes are serialised by a
                 per-cell ``threading.RLock``

`new_cell` picks the flavour from the active configuration; `clone` always
preserves the flavour of the source cell.
"""

from __future__ import annotations

import threading
from typing import Any, Iterable, List, Optional

from ...domain._cell import ICell
from .._config import get_config


class Cell(ICell):
    """
    A single shareable scalar storage location.

    Notes
    -----
    - `__slots__` keeps per-element overhead low, since every array element
      is its own object.
    - Cells compare by identity: two cells holding equal values are still
      distinct storage.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    def read(self) -> Any:
        return self._value

    def write(self, value: Any) -> None:
        self._value = value

    def clone(self) -> "Cell":
        return type(self)(self.read())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.read()!r})"


class LockedCell(Cell):
    """
    A cell whose reads and writes hold a per-cell lock.

    Two views may reference the same cell from different threads; the lock
    guarantees a write through one view never interleaves with a read or
    write through another.
    """

    __slots__ = ("_lock",)

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self._lock = threading.RLock()

    def read(self) -> Any:
        with self._lock:
            return self._value

    def write(self, value: Any) -> None:
        with self._lock:
            self._value = value


def new_cell(value: Any, *, thread_safe: Optional[bool] = None) -> Cell:
    """
    Create a fresh cell holding `value`.

    Parameters
    ----------
    value : Any
        Initial value.
    thread_safe : Optional[bool], optional
        Force the locked (True) or plain (False) flavour. Defaults to the
        ``thread_safe`` setting of the active configuration.
    """
    if thread_safe is None:
        thread_safe = get_config().thread_safe
    return LockedCell(value) if thread_safe else Cell(value)


def new_cells(values: Iterable[Any]) -> List[Cell]:
    """Create one fresh cell per value, in order."""
    thread_safe = get_config().thread_safe
    return [new_cell(v, thread_safe=thread_safe) for v in values]


def read_all(cells: Iterable[ICell]) -> List[Any]:
    """Return the current values of `cells`, in order."""
    return [cell.read() for cell in cells]
