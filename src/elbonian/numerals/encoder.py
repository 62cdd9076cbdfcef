"""Integer -> numeral, greedy over the symbol table."""

from __future__ import annotations

from elbonian.core.exceptions import ValueOutOfBoundsError
from elbonian.core.types import Numeral
from elbonian.numerals.symbols import MAX_VALUE, MIN_VALUE, SYMBOL_TABLE


def encode(target: int, *, original_input: str | None = None) -> Numeral:
    """Build the canonical numeral for ``target``.

    Walks the table from the heaviest symbol down, appending a symbol while
    it keeps the running value at or below ``target`` and its repeat budget
    is not spent. Raises ValueOutOfBoundsError when ``target`` is outside
    [MIN_VALUE, MAX_VALUE] or the table runs out before an exact match.
    """
    original = str(target) if original_input is None else original_input
    if not MIN_VALUE <= target <= MAX_VALUE:
        raise ValueOutOfBoundsError(original)

    confirmed: list[str] = []
    confirmed_value = 0
    index = 0
    while confirmed_value != target:
        if index == len(SYMBOL_TABLE):
            raise ValueOutOfBoundsError(original)
        entry = SYMBOL_TABLE[index]
        repeats = 0
        while repeats < entry.max_repeat and confirmed_value + entry.weight <= target:
            confirmed.append(entry.symbol)
            confirmed_value += entry.weight
            repeats += 1
        index += 1
    return "".join(confirmed)
