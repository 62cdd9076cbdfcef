"""Symbol table, grammar check, and the two conversion directions."""

from __future__ import annotations

from elbonian.numerals.decoder import decode
from elbonian.numerals.encoder import encode
from elbonian.numerals.grammar import is_valid_numeral
from elbonian.numerals.symbols import (
    MAX_NUMERAL,
    MAX_VALUE,
    MIN_VALUE,
    SYMBOL_TABLE,
    SymbolEntry,
    iter_symbols,
    lookup,
)

__all__ = [
    "MAX_NUMERAL",
    "MAX_VALUE",
    "MIN_VALUE",
    "SYMBOL_TABLE",
    "SymbolEntry",
    "decode",
    "encode",
    "is_valid_numeral",
    "iter_symbols",
    "lookup",
]
