"""Elbonian numeral converter."""

from __future__ import annotations

from elbonian.core.exceptions import (
    ConversionError,
    ElbonianError,
    MalformedNumberError,
    ValueOutOfBoundsError,
)
from elbonian.models.converted_number import ConversionResult, ConvertedNumber, convert

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionResult",
    "ConvertedNumber",
    "ElbonianError",
    "MalformedNumberError",
    "ValueOutOfBoundsError",
    "convert",
]
