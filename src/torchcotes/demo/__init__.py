"""
Demonstration of the Newton-Cotes rules.

Example integrands:
    identity, square, cube, INTEGRANDS

Reporting:
    METHODS, example, format_example

Command line:
    main (``torchcotes-demo`` / ``python -m torchcotes.demo``)
"""

from torchcotes.demo._cli import main, parse_bounds
from torchcotes.demo._example import METHODS, example, format_example
from torchcotes.demo._integrands import INTEGRANDS, cube, identity, square

__all__ = [
    # Integrands
    "identity",
    "square",
    "cube",
    "INTEGRANDS",
    # Reporting
    "METHODS",
    "example",
    "format_example",
    # Command line
    "main",
    "parse_bounds",
]
