"""torchcotes: composite Newton-Cotes quadrature on PyTorch tensors."""

from . import (
    demo,
    quadrature,
)

__all__ = [
    "demo",
    "quadrature",
]

__version__ = "0.1.0"
