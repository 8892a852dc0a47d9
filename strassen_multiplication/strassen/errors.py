"""Exception types raised by the Strassen multiplication engine."""

from __future__ import annotations


class StrassenError(ValueError):
    """Base class for invalid inputs to the multiplication engine."""


class DimensionMismatchError(StrassenError):
    """Two operands report different dimensions."""


class InvalidDimensionError(StrassenError):
    """A matrix is not square or its side is not a positive power of two."""


class InvalidEntryError(StrassenError):
    """Matrix entries are not integers or do not fit the configured dtype."""
