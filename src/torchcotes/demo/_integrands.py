"""Example integrands."""

from typing import Dict

from torch import Tensor

from torchcotes.quadrature import Integrand


def identity(x: Tensor) -> Tensor:
    """f(x) = x"""
    return x


def square(x: Tensor) -> Tensor:
    """f(x) = x^2"""
    return x * x


def cube(x: Tensor) -> Tensor:
    """f(x) = x^3"""
    return x * x * x


INTEGRANDS: Dict[str, Integrand] = {
    "x": identity,
    "x^2": square,
    "x^3": cube,
}
