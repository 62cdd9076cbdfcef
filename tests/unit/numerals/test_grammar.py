"""Tests for the numeral grammar check."""

from __future__ import annotations

import pytest

from elbonian.numerals.grammar import is_valid_numeral


@pytest.mark.parametrize(
    "numeral",
    [
        "",
        "I",
        "III",
        "M",
        "MMM",
        "eC",
        "LmVw",
        "MMCX",
        "MDeCLmXVwI",  # not the shortest form, still in order
        "MMMDeCCCLmXXXVwIII",
    ],
)
def test_valid_numerals(numeral):
    assert is_valid_numeral(numeral)


@pytest.mark.parametrize(
    "numeral",
    [
        # Too many repeats
        "MMMM",
        "CCCC",
        "XXXX",
        "IIII",
        "DD",
        "ee",
        "mm",
        "ww",
        # Out of order
        "IM",
        "wV",
        "CD",
        "mL",
        "MDM",
        # Foreign characters
        "abc",
        "MMCXZ",
        "E",
        "99",
        # Whitespace is never consumed
        "9 9",
        "M M",
        " M",
        "M ",
    ],
)
def test_invalid_numerals(numeral):
    assert not is_valid_numeral(numeral)
