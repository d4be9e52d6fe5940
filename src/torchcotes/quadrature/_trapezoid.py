"""Composite trapezoidal rule."""

from typing import Callable, Optional, Union

import torch
from torch import Tensor

from torchcotes.quadrature._newton_cotes import (
    _check_subintervals,
    newton_cotes,
)


def trapezoid_weights(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Coefficients of the composite trapezoidal rule on ``n`` subintervals.

    Returns ``[1/2, 1, 1, ..., 1, 1/2]`` (``n + 1`` entries). The integral is
    ``h`` times the weighted sum of the samples.

    Raises
    ------
    ValueError
        If n < 1.
    """
    _check_subintervals(n)

    weights = torch.ones(n + 1, dtype=dtype, device=device)
    weights[0] = 0.5
    weights[-1] = 0.5

    return weights


def evaluate_trapezoid(
    f: Callable[[Tensor], Tensor],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b with the composite trapezoidal rule.

    integral = h * [f(a)/2 + f(a + h) + ... + f(a + (n-1)*h) + f(b)/2],
    with h = (b - a) / n.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns function
        values of the same shape.
    n : int
        Number of subintervals. Must be at least 1.
    a, b : float or Tensor
        Lower and upper integration bounds. Can be batched. ``a > b`` gives
        the negatively oriented integral.
    vectorized : bool
        If True (default), ``f`` is called once on the tensor of all sample
        points. If False, ``f`` is called on each sample point separately
        with a 0-d tensor, so any real-to-real function works, e.g.
        ``math.exp`` or a function that branches on ``x``.

    Returns
    -------
    Tensor
        Integral approximation. Shape matches broadcast(a, b).

    Raises
    ------
    ValueError
        If n < 1. The division by ``n`` is never attempted.

    Notes
    -----
    Second-order accurate, exact for linear integrands. Samples ``f`` at
    ``n + 1`` points including both endpoints.

    Non-finite values of ``f`` propagate into the result.

    Examples
    --------
    >>> evaluate_trapezoid(lambda x: x * x, 100, 1.0, 3.0)  # approximately 8.6668
    """
    return newton_cotes(
        f, n, a, b, trapezoid_weights, closed=True, vectorized=vectorized
    )
