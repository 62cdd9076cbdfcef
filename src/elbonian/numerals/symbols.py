"""The fixed Elbonian symbol table.

Entries are ordered by strictly decreasing weight. That order is both the
order symbol groups must appear in a numeral and the order the encoder tries
symbols in.
"""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field

from elbonian.core.types import Symbol, Weight


class SymbolEntry(BaseModel):
    """One symbol of the numeral system."""

    model_config = {"frozen": True}

    symbol: Symbol = Field(min_length=1, max_length=1)
    weight: Weight = Field(gt=0)
    max_repeat: int = Field(ge=1, le=3)


SYMBOL_TABLE: tuple[SymbolEntry, ...] = (
    SymbolEntry(symbol="M", weight=1000, max_repeat=3),
    SymbolEntry(symbol="D", weight=500, max_repeat=1),
    SymbolEntry(symbol="e", weight=400, max_repeat=1),
    SymbolEntry(symbol="C", weight=100, max_repeat=3),
    SymbolEntry(symbol="L", weight=50, max_repeat=1),
    SymbolEntry(symbol="m", weight=40, max_repeat=1),
    SymbolEntry(symbol="X", weight=10, max_repeat=3),
    SymbolEntry(symbol="V", weight=5, max_repeat=1),
    SymbolEntry(symbol="w", weight=4, max_repeat=1),
    SymbolEntry(symbol="I", weight=1, max_repeat=3),
)

_WEIGHTS: dict[Symbol, Weight] = {entry.symbol: entry.weight for entry in SYMBOL_TABLE}

MIN_VALUE = 0
MAX_VALUE = sum(entry.weight * entry.max_repeat for entry in SYMBOL_TABLE)  # 4332
MAX_NUMERAL = "".join(entry.symbol * entry.max_repeat for entry in SYMBOL_TABLE)


def lookup(symbol: Symbol) -> Weight | None:
    """Return the weight of ``symbol``, or None if it is not in the table."""
    return _WEIGHTS.get(symbol)


def iter_symbols() -> Iterator[SymbolEntry]:
    return iter(SYMBOL_TABLE)
