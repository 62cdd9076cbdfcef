"""Grammar check for Elbonian numerals."""

from __future__ import annotations

from elbonian.numerals.symbols import iter_symbols


def is_valid_numeral(trimmed: str) -> bool:
    """Return True if ``trimmed`` is a well-formed Elbonian numeral.

    Each table entry, in order, consumes up to ``max_repeat`` copies of its
    symbol. The string is valid only if nothing is left over once every entry
    has had its turn. Symbols are distinct, so no backtracking is needed.
    The empty string is valid.
    """
    cursor = 0
    end = len(trimmed)
    for entry in iter_symbols():
        taken = 0
        while taken < entry.max_repeat and cursor < end and trimmed[cursor] == entry.symbol:
            cursor += 1
            taken += 1
    return cursor == end
