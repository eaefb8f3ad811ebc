"""
ndcell: n-dimensional arrays backed by individually shared cells.

Slices, integer indexing and reshapes return *views* that reference the very
same cells as the array they came from; writes through either are visible in
both. Arithmetic, `astype`, `clone` and `broadcast_to` produce fresh cells.
"""

from .domain._errors import (
    BroadcastError,
    IndexOutOfBoundsError,
    IndexTypeError,
    RaggedArrayWarning,
    RaggedShapeError,
    ReshapeError,
    ScalarConversionError,
    ScalarIndexError,
    TooManyIndicesError,
    UnsizedArrayError,
    UnsupportedOperatorError,
)
from .domain.utils._shape import broadcast_shapes, format_shape, shape_size
from .infrastructure._config import Config, config_override, configure, get_config
from .infrastructure.array import Array, Index, Keep, Range, format_array, shares_cells

array = Array.array
scalar = Array.scalar
arange = Array.arange
full = Array.full
zeros = Array.zeros
ones = Array.ones
from_numpy = Array.from_numpy

__version__ = "0.1.0a0"

__all__ = [
    "Array",
    "Index",
    "Range",
    "Keep",
    "array",
    "scalar",
    "arange",
    "full",
    "zeros",
    "ones",
    "from_numpy",
    "shares_cells",
    "format_array",
    "shape_size",
    "format_shape",
    "broadcast_shapes",
    "Config",
    "get_config",
    "configure",
    "config_override",
    "BroadcastError",
    "IndexOutOfBoundsError",
    "IndexTypeError",
    "RaggedArrayWarning",
    "RaggedShapeError",
    "ReshapeError",
    "ScalarConversionError",
    "ScalarIndexError",
    "TooManyIndicesError",
    "UnsizedArrayError",
    "UnsupportedOperatorError",
]
