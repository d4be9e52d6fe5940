"""Composite midpoint rule."""

from typing import Callable, Optional, Union

import torch
from torch import Tensor

from torchcotes.quadrature._newton_cotes import (
    _check_subintervals,
    newton_cotes,
)


def midpoint_weights(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Unit weight for each of the ``n`` panel midpoints."""
    _check_subintervals(n)

    return torch.ones(n, dtype=dtype, device=device)


def evaluate_midpoint(
    f: Callable[[Tensor], Tensor],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b with the composite midpoint rule.

    integral = h * [f(a + h/2) + f(a + 3h/2) + ... + f(b - h/2)],
    with h = (b - a) / n.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns function
        values of the same shape.
    n : int
        Number of subintervals. Must be at least 1.
    a, b : float or Tensor
        Lower and upper integration bounds. Can be batched.
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
        If n < 1.

    Notes
    -----
    Open rule: ``f`` is never evaluated at ``a`` or ``b``, so integrands
    that are undefined at an endpoint (e.g. ``1/sqrt(x)`` at 0) still give a
    finite result. Second-order accurate, exact for linear integrands.

    Examples
    --------
    >>> evaluate_midpoint(lambda x: x * x, 100, 1.0, 3.0)  # approximately 8.6666
    """
    return newton_cotes(
        f, n, a, b, midpoint_weights, closed=False, vectorized=vectorized
    )
