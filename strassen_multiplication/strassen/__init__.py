"""Strassen multiplication engine exports."""

from strassen_multiplication.strassen.core import (
    EngineStats,
    StrassenEngine,
    add,
    assemble_quadrants,
    is_power_of_two,
    naive_multiply_views,
    strassen_multiply,
    subtract,
)
from strassen_multiplication.strassen.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    InvalidEntryError,
    StrassenError,
)
from strassen_multiplication.strassen.view import MatrixView, Quadrant

__all__ = [
    "DimensionMismatchError",
    "EngineStats",
    "InvalidDimensionError",
    "InvalidEntryError",
    "MatrixView",
    "Quadrant",
    "StrassenEngine",
    "StrassenError",
    "add",
    "assemble_quadrants",
    "is_power_of_two",
    "naive_multiply_views",
    "strassen_multiply",
    "subtract",
]
