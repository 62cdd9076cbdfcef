"""Numeral -> integer."""

from __future__ import annotations

from elbonian.core.exceptions import MalformedNumberError
from elbonian.core.types import Numeral
from elbonian.numerals.symbols import lookup


def decode(numeral: Numeral, *, original_input: str | None = None) -> int:
    """Sum the weights of every symbol in ``numeral``.

    Expects a grammar-valid numeral. An unknown character raises
    MalformedNumberError carrying ``original_input`` (or ``numeral`` itself
    when no original was given).
    """
    total = 0
    for char in numeral:
        weight = lookup(char)
        if weight is None:
            raise MalformedNumberError(numeral if original_input is None else original_input)
        total += weight
    return total
