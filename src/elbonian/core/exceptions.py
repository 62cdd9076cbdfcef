"""Elbonian exception hierarchy."""

from __future__ import annotations


class ElbonianError(Exception):
    """Base exception for all Elbonian errors."""


class ConversionError(ElbonianError):
    """A string could not be turned into a converted number."""

    reason = "conversion failed"

    def __init__(self, original_input: str) -> None:
        self.original_input = original_input
        super().__init__(f"{original_input!r}: {self.reason}")


class MalformedNumberError(ConversionError):
    """Input is neither a grammar-valid numeral nor a base-10 integer."""

    reason = "not a valid Elbonian numeral or base-10 integer"


class ValueOutOfBoundsError(ConversionError):
    """Integer input cannot be represented as an Elbonian numeral."""

    reason = "value cannot be represented as an Elbonian numeral"
