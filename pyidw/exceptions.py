"""
Exception types for PyIDW.

Both errors derive from ValueError so callers that already guard
interpolation inputs with ``except ValueError`` keep working.
"""


class InvalidInput(ValueError):
    """Raised when a model is constructed from unusable sample data."""


class DimensionMismatch(ValueError):
    """Raised when a query does not have the dimensionality of the model."""
