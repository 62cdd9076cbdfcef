"""Type aliases used across the Elbonian package."""

from __future__ import annotations

Symbol = str
Weight = int
Numeral = str
RawInput = str
