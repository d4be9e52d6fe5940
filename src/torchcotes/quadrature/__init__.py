"""
Composite Newton-Cotes quadrature.

Function-based integration (evaluates callable):
    evaluate_trapezoid, evaluate_simpson_1_3, evaluate_simpson_3_8,
    evaluate_boole, evaluate_midpoint

Quadrature rule class and registry:
    NewtonCotes, get_rule

Coefficient patterns and sample points:
    trapezoid_weights, simpson_1_3_weights, simpson_3_8_weights,
    boole_weights, midpoint_weights, newton_cotes_nodes

Warnings:
    QuadratureWarning
"""

from torchcotes.quadrature._boole import boole_weights, evaluate_boole
from torchcotes.quadrature._exceptions import QuadratureWarning
from torchcotes.quadrature._midpoint import (
    evaluate_midpoint,
    midpoint_weights,
)
from torchcotes.quadrature._newton_cotes import newton_cotes_nodes
from torchcotes.quadrature._rules import (
    Integrand,
    NewtonCotes,
    QuadratureRule,
    get_rule,
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

__all__ = [
    # Function-based
    "evaluate_trapezoid",
    "evaluate_simpson_1_3",
    "evaluate_simpson_3_8",
    "evaluate_boole",
    "evaluate_midpoint",
    # Rule class
    "NewtonCotes",
    "get_rule",
    "Integrand",
    "QuadratureRule",
    # Weights and nodes
    "trapezoid_weights",
    "simpson_1_3_weights",
    "simpson_3_8_weights",
    "boole_weights",
    "midpoint_weights",
    "newton_cotes_nodes",
    # Warnings
    "QuadratureWarning",
]
