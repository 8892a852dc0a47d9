"""Strassen multiplication of power-of-two square integer matrices."""

from strassen_multiplication.common.config import StrassenConfig
from strassen_multiplication.strassen import (
    DimensionMismatchError,
    InvalidDimensionError,
    InvalidEntryError,
    StrassenError,
    strassen_multiply,
)

__all__ = [
    "DimensionMismatchError",
    "InvalidDimensionError",
    "InvalidEntryError",
    "StrassenConfig",
    "StrassenError",
    "strassen_multiply",
]

__version__ = "0.1.0"
