"""
Elementwise operator registry for arrays.

This module defines the shared registry through which scalar kernels for the
elementwise binary operators (``+ - * /``) are registered and resolved.

Typical usage
-------------
Kernel modules register themselves by operator:

    @elementwise_operator(Operator.ADD)
    def scalar_add(lhs, rhs): ...

and the arithmetic mixin resolves them at call time:

    kernel = elementwise_operator.resolve(Operator.ADD)

Notes
-----
- Kernel modules are imported by ``mixins.arithmetic`` for their side
  effect of registering; they are not part of the public API.
- A missing kernel surfaces as `UnsupportedOperatorError` (a `TypeError`).
"""

from ...domain.utils._operator_registry import create_operator_builder

# Registry mapping elementwise operator symbols to scalar kernels
elementwise_operator = create_operator_builder("elementwise")
