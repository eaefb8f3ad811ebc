from ._array import Array, shares_cells
from ._formatting import format_array
from ._selectors import Index, Keep, Range

__all__ = [
    Array.__name__,
    Index.__name__,
    Keep.__name__,
    Range.__name__,
    format_array.__name__,
    shares_cells.__name__,
]
