"""Composite Boole's rule."""

from typing import Callable, Optional, Union

import torch
from torch import Tensor

from torchcotes.quadrature._newton_cotes import (
    _check_subintervals,
    newton_cotes,
)


def boole_weights(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Coefficients of the composite Boole's rule on ``n`` subintervals.

    Returns ``[7, 32, 12, 32, 14, 32, 12, 32, 14, ..., 32, 7]``. Odd
    interior indices get 32, even interior indices get 14 when divisible by
    4 (panel joins) and 12 otherwise, endpoints get 7. The integral is
    ``2h / 45`` times the weighted sum.

    Raises
    ------
    ValueError
        If n < 1.
    """
    _check_subintervals(n)

    weights = torch.full((n + 1,), 32.0, dtype=dtype, device=device)
    weights[2::4] = 12.0
    weights[::4] = 14.0
    weights[0] = 7.0
    weights[-1] = 7.0

    return weights


def evaluate_boole(
    f: Callable[[Tensor], Tensor],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b with the composite Boole's rule.

    integral = (2h/45) * [7 f(x0) + 32 f(x1) + 12 f(x2) + 32 f(x3)
                          + 14 f(x4) + ... + 32 f(x_{n-1}) + 7 f(xn)],
    with h = (b - a) / n and xi = a + i*h.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns function
        values of the same shape.
    n : int
        Number of subintervals. Should be a multiple of 4; must be at
        least 1.
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
    Sixth-order accurate and exact for polynomials of degree <= 5 when
    ``n`` is a multiple of 4. Other values of ``n`` are accepted without
    warning and give a defined but distorted result.

    Examples
    --------
    >>> evaluate_boole(lambda x: x**3, 100, 0.0, 2.0)  # approximately 4.0
    """
    return newton_cotes(
        f,
        n,
        a,
        b,
        boole_weights,
        closed=True,
        numerator=2.0,
        denominator=45.0,
        vectorized=vectorized,
    )
