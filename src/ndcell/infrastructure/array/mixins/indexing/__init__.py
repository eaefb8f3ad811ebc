"""
Array view and indexing mixin.

`ArrayMixinIndexing` adapts Python subscription (``a[key]``,
``a[key] = value``), `slice`, `reshape`, `broadcast_to` and iteration onto
the selector-based view engine.

Public API
----------
Only `ArrayMixinIndexing` is re-exported.
"""

from ._base import ArrayMixinIndexing

__all__ = [
    ArrayMixinIndexing.__name__,
]
