"""Composite Simpson's 1/3 and 3/8 rules."""

from typing import Callable, Optional, Union

import torch
from torch import Tensor

from torchcotes.quadrature._newton_cotes import (
    _check_subintervals,
    newton_cotes,
)


def simpson_1_3_weights(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Coefficients of the composite Simpson's 1/3 rule on ``n`` subintervals.

    Returns ``[1, 4, 2, 4, ..., 2, 4, 1]``: interior points with odd index
    get 4, interior points with even index get 2, endpoints get 1. The
    integral is ``h / 3`` times the weighted sum.

    Odd ``n`` is accepted; the pattern is simply truncated.

    Raises
    ------
    ValueError
        If n < 1.
    """
    _check_subintervals(n)

    weights = torch.full((n + 1,), 2.0, dtype=dtype, device=device)
    weights[1::2] = 4.0
    weights[0] = 1.0
    weights[-1] = 1.0

    return weights


def simpson_3_8_weights(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Coefficients of the composite Simpson's 3/8 rule on ``n`` subintervals.

    Returns ``[1, 3, 3, 2, 3, 3, 2, ..., 3, 3, 1]``: interior points whose
    index is a multiple of 3 get 2, other interior points get 3, endpoints
    get 1. The integral is ``3h / 8`` times the weighted sum.

    Raises
    ------
    ValueError
        If n < 1.
    """
    _check_subintervals(n)

    weights = torch.full((n + 1,), 3.0, dtype=dtype, device=device)
    weights[::3] = 2.0
    weights[0] = 1.0
    weights[-1] = 1.0

    return weights


def evaluate_simpson_1_3(
    f: Callable[[Tensor], Tensor],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b with the composite Simpson's 1/3 rule.

    integral = (h/3) * [f(x0) + 4 f(x1) + 2 f(x2) + 4 f(x3) + ... + f(xn)],
    with h = (b - a) / n and xi = a + i*h.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns function
        values of the same shape.
    n : int
        Number of subintervals. Should be even; must be at least 1.
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
    Fourth-order accurate and exact for cubics when ``n`` is even. An odd
    ``n`` is not rejected: the last panel receives a truncated weight
    pattern and the result is defined but less accurate.

    Examples
    --------
    >>> evaluate_simpson_1_3(lambda x: x, 100, 1.0, 3.0)  # 4.0
    """
    return newton_cotes(
        f,
        n,
        a,
        b,
        simpson_1_3_weights,
        closed=True,
        denominator=3.0,
        vectorized=vectorized,
    )


def evaluate_simpson_3_8(
    f: Callable[[Tensor], Tensor],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b with the composite Simpson's 3/8 rule.

    integral = (3h/8) * [f(x0) + 3 f(x1) + 3 f(x2) + 2 f(x3) + ... + f(xn)],
    with h = (b - a) / n and xi = a + i*h.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns function
        values of the same shape.
    n : int
        Number of subintervals. Should be a multiple of 3; must be at
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
    Exact for cubics when ``n`` is a multiple of 3. Otherwise the weights
    no longer sum to ``8n/3`` and the result misses the exact value even
    for constant or linear integrands. This is expected, no warning is
    issued.

    Examples
    --------
    >>> evaluate_simpson_3_8(lambda x: x * x, 99, 1.0, 3.0)  # approximately 8.6667
    """
    return newton_cotes(
        f,
        n,
        a,
        b,
        simpson_3_8_weights,
        closed=True,
        numerator=3.0,
        denominator=8.0,
        vectorized=vectorized,
    )
