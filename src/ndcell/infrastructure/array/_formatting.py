"""Human-readable rendering and nesting of shaped values."""

from typing import Any, Callable, List, Sequence

from ...domain._array import IArray
from ...domain.utils._shape import shape_size


def nest(values: Sequence[Any], shape: Sequence[int]) -> Any:
    """
    Expand a flat row-major list into nested lists following `shape`.

    An empty shape returns the single value itself.
    """
    if not shape:
        return values[0]
    dim, *rest = shape
    step = shape_size(rest)
    return [nest(values[i * step : (i + 1) * step], rest) for i in range(dim)]


def describe(
    values: Sequence[Any],
    shape: Sequence[int],
    descr: Callable[[Any], str] = str,
    sep: str = ", ",
    lparen: str = "[",
    rparen: str = "]",
) -> str:
    """
    Render flat row-major values as nested bracket groups.

    A 0-d shape renders the bare value; every further dimension adds one
    level of ``lparen ... rparen`` with elements joined by `sep`.
    """
    if not shape:
        return descr(values[0])
    dim, *rest = shape
    step = shape_size(rest)
    rows: List[str] = [
        describe(values[i * step : (i + 1) * step], rest, descr, sep, lparen, rparen)
        for i in range(dim)
    ]
    return lparen + sep.join(rows) + rparen


def format_array(a: IArray, descr: Callable[[Any], str] = str, sep: str = ", ") -> str:
    """
    Render the current values of `a`.

    Examples
    --------
    ``arange(6).reshape(2, 3)`` renders as ``[[0, 1, 2], [3, 4, 5]]`` and
    ``scalar(7)`` as ``7``.
    """
    values = [cell.read() for cell in a.cells]
    return describe(values, a.shape, descr=descr, sep=sep)
