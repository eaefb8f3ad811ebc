"""
Element type helpers.

An array records a dtype that is used to cast values written into its cells
and to build `astype` results. Only a minimal ordering of the built-in
numeric types is applied when inferring a dtype; any other type (NumPy
scalars, `fractions.Fraction`, ...) is taken as-is from the first value.
"""

from typing import Any, Callable, Iterable

import numpy as np

_PROMOTION_ORDER = (bool, int, float, complex)


def infer_dtype(values: Iterable[Any], default: Any = float) -> Any:
    """
    Infer an element type from `values`.

    Built-in numbers widen along ``bool < int < float < complex``; otherwise
    the type of the first value wins. An empty input yields `default`.
    """
    best = None
    for value in values:
        kind = type(value)
        if best is None:
            best = kind
        elif (
            kind is not best
            and kind in _PROMOTION_ORDER
            and best in _PROMOTION_ORDER
            and _PROMOTION_ORDER.index(kind) > _PROMOTION_ORDER.index(best)
        ):
            best = kind
    return default if best is None else best


def make_caster(dtype: Any) -> Callable[[Any], Any]:
    """
    Return a callable converting a single value to `dtype`.

    Python types (built-in or not) are used directly as constructors;
    NumPy scalar types and anything else `numpy.dtype` understands (e.g.
    ``"float32"``) cast through the corresponding NumPy scalar type.
    """
    if isinstance(dtype, type) and not issubclass(dtype, np.generic):
        return dtype
    return np.dtype(dtype).type


def numpy_dtype(dtype: Any) -> np.dtype:
    """Map an element type to a NumPy dtype, falling back to ``object``."""
    try:
        return np.dtype(dtype)
    except TypeError:
        return np.dtype(object)
