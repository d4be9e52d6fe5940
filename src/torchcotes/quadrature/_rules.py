"""Newton-Cotes quadrature rule class and rule registry."""

from typing import Callable, Dict, NamedTuple, Optional, Tuple, Union

import torch
from torch import Tensor

from torchcotes.quadrature._boole import boole_weights, evaluate_boole
from torchcotes.quadrature._midpoint import (
    evaluate_midpoint,
    midpoint_weights,
)
from torchcotes.quadrature._newton_cotes import (
    _as_tensors,
    _check_subintervals,
    newton_cotes_nodes,
)
from torchcotes.quadrature._simpson import (
    evaluate_simpson_1_3,
    evaluate_simpson_3_8,
    simpson_1_3_weights,
    simpson_3_8_weights,
)
from torchcotes.quadrature._trapezoid import (
    evaluate_trapezoid,
    trapezoid_weights,
)

Integrand = Callable[[Tensor], Tensor]

# rule(f, n, a, b) -> integral
QuadratureRule = Callable[
    [Integrand, int, Union[float, Tensor], Union[float, Tensor]], Tensor
]


class _RuleSpec(NamedTuple):
    evaluate: QuadratureRule
    weights: Callable[..., Tensor]
    closed: bool
    scale: float


_RULES: Dict[str, _RuleSpec] = {
    "trapezoid": _RuleSpec(evaluate_trapezoid, trapezoid_weights, True, 1.0),
    "simpson_1_3": _RuleSpec(
        evaluate_simpson_1_3, simpson_1_3_weights, True, 1.0 / 3.0
    ),
    "simpson_3_8": _RuleSpec(
        evaluate_simpson_3_8, simpson_3_8_weights, True, 3.0 / 8.0
    ),
    "boole": _RuleSpec(evaluate_boole, boole_weights, True, 2.0 / 45.0),
    "midpoint": _RuleSpec(evaluate_midpoint, midpoint_weights, False, 1.0),
}


def _lookup(rule: str) -> _RuleSpec:
    try:
        return _RULES[rule]
    except KeyError:
        raise ValueError(
            f"rule must be one of {', '.join(map(repr, _RULES))}, "
            f"got {rule!r}"
        ) from None


def get_rule(rule: str) -> QuadratureRule:
    """
    Return the evaluator registered under ``rule``.

    Parameters
    ----------
    rule : str
        One of ``"trapezoid"``, ``"simpson_1_3"``, ``"simpson_3_8"``,
        ``"boole"``, ``"midpoint"``.

    Returns
    -------
    callable
        Function with signature ``(f, n, a, b, *, vectorized=True) -> Tensor``.

    Raises
    ------
    ValueError
        If ``rule`` is not a registered name.

    Examples
    --------
    >>> get_rule("boole")(lambda x: x, 8, 0.0, 1.0)  # 0.5
    """
    return _lookup(rule).evaluate


class NewtonCotes:
    """
    Composite Newton-Cotes quadrature rule.

    Bundles one of the registered rules with a fixed number of
    subintervals. Closed rules sample ``n + 1`` equally spaced points
    including both endpoints; the open midpoint rule samples the ``n``
    panel midpoints.

    Parameters
    ----------
    rule : str
        Rule name. See ``NewtonCotes.rules``.
    n : int
        Number of subintervals.

    Examples
    --------
    >>> rule = NewtonCotes("simpson_1_3", 100)
    >>> nodes, weights = rule.nodes_and_weights(a=0, b=1)
    >>> result = rule.integrate(torch.sin, 0, torch.pi)  # approximately 2.0

    Attributes
    ----------
    rule : str
        Rule name.
    n : int
        Number of subintervals.
    """

    rules: Tuple[str, ...] = tuple(_RULES)

    def __init__(self, rule: str = "simpson_1_3", n: int = 100):
        self._spec = _lookup(rule)
        _check_subintervals(n)
        self.rule = rule
        self.n = n
        self._cache: dict = {}

    def __repr__(self) -> str:
        return f"NewtonCotes(rule={self.rule!r}, n={self.n})"

    @property
    def closed(self) -> bool:
        """Whether the rule samples the interval endpoints."""
        return self._spec.closed

    def _get_base_weights(
        self,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Tensor:
        """Get cached weights for unit spacing."""
        key = (str(dtype), str(device))
        if key not in self._cache:
            self._cache[key] = self._spec.scale * self._spec.weights(
                self.n, dtype=dtype, device=device
            )
        return self._cache[key]

    def nodes_and_weights(
        self,
        a: Union[float, Tensor] = 0.0,
        b: Union[float, Tensor] = 1.0,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Tuple[Tensor, Tensor]:
        """
        Return sample points and weights for the interval [a, b].

        If a and b are tensors, returns batched nodes/weights.

        Parameters
        ----------
        a, b : float or Tensor
            Integration bounds. Can be batched.
        dtype : torch.dtype, optional
            Output dtype. Inferred from a/b if not specified.
        device : torch.device, optional
            Output device. Inferred from a/b if not specified.

        Returns
        -------
        nodes : Tensor
            Shape (*batch, m) with m = n + 1 for closed rules and m = n
            for the midpoint rule.
        weights : Tensor
            Same shape as ``nodes``. Already scaled by ``h`` and the rule
            constant, so ``(f(nodes) * weights).sum(-1)`` is the integral.
        """
        a, b = _as_tensors(a, b, dtype=dtype, device=device)

        nodes, h = newton_cotes_nodes(self.n, a, b, closed=self.closed)
        base_weights = self._get_base_weights(nodes.dtype, nodes.device)

        weights = h.unsqueeze(-1) * base_weights

        return nodes, weights

    def integrate(
        self,
        f: Integrand,
        a: Union[float, Tensor],
        b: Union[float, Tensor],
        *,
        vectorized: bool = True,
    ) -> Tensor:
        """
        Integrate f from a to b.

        Parameters
        ----------
        f : callable
            Integrand function. Takes tensor of sample points, returns same
            shape.
        a, b : float or Tensor
            Integration bounds.
        vectorized : bool
            If False, call ``f`` on one sample point at a time.

        Returns
        -------
        Tensor
            Integral value(s). Shape matches broadcast(a, b) or scalar.
        """
        return self._spec.evaluate(f, self.n, a, b, vectorized=vectorized)
