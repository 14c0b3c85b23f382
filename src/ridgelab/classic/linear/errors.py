from __future__ import annotations


class RegressionError(ValueError):
    """Base class for shape and conditioning failures in the linear engine."""


class DimensionMismatch(RegressionError):
    """Matrix/vector shapes are incompatible with the requested operation."""


class SingularMatrix(RegressionError):
    """A pivot vanished during elimination."""


class LengthMismatch(RegressionError):
    """Prediction and target sequences differ in length."""
