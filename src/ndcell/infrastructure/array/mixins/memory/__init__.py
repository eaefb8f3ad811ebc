"""
Array construction and value-movement mixin.

`ArrayMixinMemory` provides the factory constructors (`array`, `scalar`,
`arange`, `full`, `zeros`, `ones`, `from_numpy`) and the operations that
move values between cells, NumPy and Python containers (`astype`, `clone`,
`assign`, `fill`, `tolist`, `to_numpy`).

Public API
----------
Only `ArrayMixinMemory` is re-exported; literal flattening is an internal
helper.
"""

from ._base import ArrayMixinMemory

__all__ = [
    ArrayMixinMemory.__name__,
]
