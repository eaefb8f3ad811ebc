"""
Key-based operator dispatch via decorators.

This module provides a small mechanism for routing an operator symbol to one
of several registered scalar kernels. It replaces an ``if/elif`` (or
``switch``) chain over operator kinds with a registry that kernels join by
decoration.

Core idea
---------
- A *builder* is created per operator family (e.g. ``"elementwise"``).
- Kernels register themselves under a hashable symbol:

      elementwise_operator = create_operator_builder("elementwise")

      @elementwise_operator(Operator.ADD)
      def scalar_add(lhs, rhs):
          return lhs + rhs

- Callers resolve the kernel at runtime with
  ``elementwise_operator.resolve(Operator.ADD)``.

Important notes
---------------
- Registered kernels are stored in a closure-local mapping owned by
  `create_operator_builder()`. Different builders do not share mappings.
- Resolving an unknown symbol raises `UnsupportedOperatorError`, a
  `TypeError`, since it signals an internal operator-selection inconsistency
  rather than bad user data.
- Registering a second kernel for the same symbol replaces the first one.
"""

from typing import Callable, Dict, Hashable, Tuple
from collections import namedtuple

from typing_extensions import ParamSpec, Protocol, TypeVar

from .._errors import UnsupportedOperatorError

P = ParamSpec("P")
R = TypeVar("R")


class OperatorBuilder(Protocol):
    """
    Protocol of the object returned by `create_operator_builder`.

    Calling it with a symbol returns a registering decorator; `resolve`
    returns the kernel registered for a symbol; `symbols` lists them.
    """

    family: str

    def __call__(
        self, symbol: Hashable
    ) -> Callable[[Callable[P, R]], Callable[P, R]]: ...

    def resolve(self, symbol: Hashable) -> Callable: ...

    def symbols(self) -> Tuple[Hashable, ...]: ...


def create_operator_builder(family: str) -> OperatorBuilder:
    """
    Create and return an operator builder for one family of operators.

    Parameters
    ----------
    family : str
        Human-readable family name, used in error messages and as part of the
        registry key.

    Returns
    -------
    OperatorBuilder
        A callable ``templator(symbol) -> decorator`` with ``resolve`` and
        ``symbols`` attached.
    """

    OperatorKey = namedtuple(
        "OperatorKey",
        [
            "Family",
            "Symbol",
        ],
    )
    """
    Tuple-like key used to uniquely identify a registered kernel.

    Fields
    ------
    Family : str
        The owning operator family.
    Symbol : Hashable
        The operator symbol selecting the kernel.
    """

    kernels_map: Dict[OperatorKey, Callable] = {}
    """Mapping from (family, symbol) keys to registered kernels."""

    def templator(symbol: Hashable) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a kernel for `symbol`.

        Raises
        ------
        TypeError
            If `symbol` is not hashable.
        """
        try:
            hash(symbol)
        except TypeError:
            raise TypeError(
                f"The argument for 'symbol' must be hashable. Got {symbol!r}"
            )

        key = OperatorKey(family, symbol)

        def decorator(kernel: Callable[P, R]) -> Callable[P, R]:
            kernels_map[key] = kernel
            return kernel

        return decorator

    def resolve(symbol: Hashable) -> Callable:
        """
        Return the kernel registered for `symbol`.

        Raises
        ------
        UnsupportedOperatorError
            If no kernel has been registered for `symbol`.
        """
        try:
            kernel = kernels_map.get(OperatorKey(family, symbol))
        except TypeError:
            kernel = None
        if kernel is None:
            raise UnsupportedOperatorError(family, symbol)
        return kernel

    def symbols() -> Tuple[Hashable, ...]:
        return tuple(key.Symbol for key in kernels_map)

    templator.family = family
    templator.resolve = resolve
    templator.symbols = symbols
    return templator
