"""
Cell interface definitions.

A cell is a single shareable scalar storage location. Arrays hold references
to cells rather than values, so several arrays (an array and its views) can
observe the same cell. This protocol captures the minimal contract the array
infrastructure relies on.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ICell(Protocol):
    """
    Cell interface.

    Notes
    -----
    - A cell has no identity beyond its current value; equality of cells is
      object identity.
    - `write` mutates in place, so every holder observes the new value.
    - `clone` returns a new, independent cell; later writes to either cell
      are not visible through the other.
    """

    def read(self) -> Any:
        """Return the current value."""
        ...

    def write(self, value: Any) -> None:
        """Replace the current value in place."""
        ...

    def clone(self) -> "ICell":
        """Return a new independent cell holding the current value."""
        ...
