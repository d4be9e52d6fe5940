"""Evaluate a rule at a base and a doubled iteration count."""

import math
import warnings
from typing import List, Tuple, Union

from torch import Tensor

from torchcotes.quadrature import (
    Integrand,
    QuadratureRule,
    QuadratureWarning,
)

# (display name, registered rule name), in report order
METHODS: List[Tuple[str, str]] = [
    ("trapezoid", "trapezoid"),
    ("simpson 1/3", "simpson_1_3"),
    ("simpson 3/8", "simpson_3_8"),
    ("mid-point", "midpoint"),
    ("boole", "boole"),
]

_RULER = "-" * 15


def example(
    rule: QuadratureRule,
    method_name: str,
    f: Integrand,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    iterations: int = 100,
) -> List[Tuple[str, int, float]]:
    """
    Evaluate ``rule`` with ``iterations`` and ``2 * iterations`` subintervals.

    Parameters
    ----------
    rule : callable
        Evaluator with signature ``(f, n, a, b) -> Tensor``.
    method_name : str
        Label carried into the result tuples.
    f : callable
        Integrand.
    a, b : float or Tensor
        Scalar integration bounds.
    iterations : int
        Base number of subintervals.

    Returns
    -------
    list of (str, int, float)
        ``(method_name, iteration_count, result)`` for both counts.

    Raises
    ------
    ValueError
        If iterations < 1.

    Warns
    -----
    QuadratureWarning
        If a result is not finite.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")

    results = []

    for n in (iterations, 2 * iterations):
        value = float(rule(f, n, a, b))

        if not math.isfinite(value):
            warnings.warn(
                f"{method_name} method gave a non-finite result ({value}) "
                f"with {n} iterations",
                QuadratureWarning,
                stacklevel=2,
            )

        results.append((method_name, n, value))

    return results


def format_example(
    results: List[Tuple[str, int, float]],
    a: float,
    b: float,
) -> str:
    """
    Render the output of ``example`` as a report block.

    Examples
    --------
    >>> print(format_example([("boole", 4, 4.0)], 1, 3))
    Integral of the given function between 1.000 and 3.000(boole method)
    ---------------
    With 4 iterations: 4.000000
    ---------------
    """
    method_name = results[0][0]

    lines = [
        f"Integral of the given function between {a:.3f} and {b:.3f}"
        f"({method_name} method)",
        _RULER,
    ]
    for _, n, value in results:
        lines.append(f"With {n} iterations: {value:f}")
    lines.append(_RULER)

    return "\n".join(lines)
