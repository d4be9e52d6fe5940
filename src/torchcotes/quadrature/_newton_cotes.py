"""Sample points and weighted accumulation shared by the Newton-Cotes rules."""

from typing import Callable, Optional, Tuple, Union

import torch
from torch import Tensor


def _check_subintervals(n: int) -> None:
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")


def _as_tensors(
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """Convert bounds to tensors sharing a dtype and device."""
    # Infer dtype and device
    if isinstance(a, Tensor):
        dtype = dtype or a.dtype
        device = device or a.device
    elif isinstance(b, Tensor):
        dtype = dtype or b.dtype
        device = device or b.device
    else:
        dtype = dtype or torch.float64
        device = device or torch.device("cpu")

    # Integer tensors would truncate h
    if not dtype.is_floating_point:
        dtype = torch.float64

    if not isinstance(a, Tensor):
        a = torch.tensor(a, dtype=dtype, device=device)
    else:
        a = a.to(dtype=dtype, device=device)
    if not isinstance(b, Tensor):
        b = torch.tensor(b, dtype=dtype, device=device)
    else:
        b = b.to(dtype=dtype, device=device)

    return a, b


def newton_cotes_nodes(
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    closed: bool = True,
) -> Tuple[Tensor, Tensor]:
    """
    Equally spaced sample points for a composite Newton-Cotes rule.

    Parameters
    ----------
    n : int
        Number of subintervals. Must be at least 1.
    a, b : float or Tensor
        Integration bounds. Can be batched; they are broadcast together.
    closed : bool
        If True, return the ``n + 1`` panel edges ``a + i*h`` including both
        endpoints (the last point is ``b`` itself). If False, return the
        ``n`` panel midpoints ``a + h/2 + i*h``.

    Returns
    -------
    nodes : Tensor
        Shape ``(*batch, n + 1)`` for closed rules, ``(*batch, n)`` for open
        rules, where ``batch`` is the broadcast shape of ``a`` and ``b``.
    h : Tensor
        Panel width ``(b - a) / n`` with shape ``batch``. Negative when
        ``a > b``.

    Raises
    ------
    ValueError
        If n < 1.

    Examples
    --------
    >>> nodes, h = newton_cotes_nodes(4, 0.0, 1.0)
    >>> nodes
    tensor([0.0000, 0.2500, 0.5000, 0.7500, 1.0000], dtype=torch.float64)
    >>> nodes, h = newton_cotes_nodes(2, 0.0, 1.0, closed=False)
    >>> nodes
    tensor([0.2500, 0.7500], dtype=torch.float64)
    """
    _check_subintervals(n)

    a, b = _as_tensors(a, b)
    a, b = torch.broadcast_tensors(a, b)

    h = (b - a) / n

    if closed:
        steps = torch.arange(n + 1, dtype=a.dtype, device=a.device)
        nodes = a.unsqueeze(-1) + steps * h.unsqueeze(-1)
        # Sample the upper bound exactly rather than a + n*h
        nodes = torch.where(steps == n, b.unsqueeze(-1), nodes)
    else:
        steps = torch.arange(n, dtype=a.dtype, device=a.device)
        nodes = (a + h / 2).unsqueeze(-1) + steps * h.unsqueeze(-1)

    return nodes, h


def newton_cotes(
    f: Callable[[Tensor], Tensor],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    weights: Callable[..., Tensor],
    *,
    closed: bool,
    numerator: float = 1.0,
    denominator: float = 1.0,
    vectorized: bool = True,
) -> Tensor:
    """
    Evaluate a composite Newton-Cotes rule.

    Computes ``numerator * (h * sum_i w_i f(x_i)) / denominator`` where the
    ``w_i`` come from ``weights(n, dtype=..., device=...)``.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points and returns the
        function values elementwise.
    n : int
        Number of subintervals.
    a, b : float or Tensor
        Integration bounds. Can be batched.
    weights : callable
        Coefficient pattern of the rule.
    closed : bool
        Whether the rule samples the endpoints.
    numerator, denominator : float
        Rule constant applied after the multiplication by ``h``.
    vectorized : bool
        If True, call ``f`` once on the tensor of all sample points. If
        False, call it on each sample point separately (as a 0-d tensor)
        and stack the results, for scalar integrands such as ``math.exp``
        or functions with Python control flow.

    Returns
    -------
    Tensor
        Integral approximation. Shape matches broadcast(a, b).
    """
    nodes, h = newton_cotes_nodes(n, a, b, closed=closed)
    w = weights(n, dtype=nodes.dtype, device=nodes.device)

    if vectorized:
        values = f(nodes)
    else:
        values = torch.stack(
            [
                torch.as_tensor(f(x), dtype=nodes.dtype, device=nodes.device)
                for x in nodes.reshape(-1)
            ]
        ).reshape(nodes.shape)

    area = (values * w).sum(dim=-1)

    return numerator * (area * h) / denominator
