"""Warnings for Newton-Cotes quadrature."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., a non-finite result)."""

    pass
