"""Converted number — an immutable pair of integer and numeral forms.

The form of the input is sniffed once: a grammar-valid string is a numeral
and gets decoded, anything that parses as a base-10 integer gets encoded.
Both forms are stored, so reading them back never fails.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from elbonian.core.exceptions import ConversionError, MalformedNumberError, ValueOutOfBoundsError
from elbonian.core.types import Numeral, RawInput
from elbonian.numerals.decoder import decode
from elbonian.numerals.encoder import encode
from elbonian.numerals.grammar import is_valid_numeral
from elbonian.numerals.symbols import MAX_VALUE, MIN_VALUE

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"([+-]?)0*([0-9]+)")
_MAX_DIGITS = len(str(MAX_VALUE))


class ConvertedNumber(BaseModel):
    """A value held in both integer and Elbonian numeral form."""

    model_config = {"frozen": True}

    original_input: RawInput = ""
    integer: int = Field(ge=MIN_VALUE, le=MAX_VALUE)
    numeral: Numeral

    @model_validator(mode="after")
    def _forms_agree(self) -> ConvertedNumber:
        if not (is_valid_numeral(self.numeral) and decode(self.numeral) == self.integer):
            raise ValueError(f"numeral {self.numeral!r} does not encode {self.integer}")
        return self

    @classmethod
    def parse(cls, raw: RawInput) -> ConvertedNumber:
        """Convert ``raw`` or raise the MalformedNumberError/ValueOutOfBoundsError."""
        return convert(raw).unwrap()

    def to_integer(self) -> int:
        return self.integer

    def to_numeral(self) -> Numeral:
        return self.numeral

    def __int__(self) -> int:
        return self.integer

    def __str__(self) -> str:
        return self.numeral


class ConversionResult(BaseModel):
    """Outcome of ``convert``: either a value or the error that stopped it."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    value: Optional[ConvertedNumber] = None
    error: Optional[ConversionError] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> ConversionResult:
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ConvertedNumber:
        if self.error is not None:
            raise self.error
        return self.value


def _build(raw: RawInput) -> ConvertedNumber:
    trimmed = raw.strip()
    if is_valid_numeral(trimmed):
        logger.debug("Decoding numeral %r", trimmed)
        integer = decode(trimmed, original_input=raw)
        return ConvertedNumber(original_input=raw, integer=integer, numeral=trimmed)

    match = _INTEGER_RE.fullmatch(trimmed)
    if match is None:
        raise MalformedNumberError(raw)
    if len(match.group(2)) > _MAX_DIGITS:
        raise ValueOutOfBoundsError(raw)

    sign, digits = match.groups()
    integer = int(sign + digits)
    logger.debug("Encoding integer %d", integer)
    return ConvertedNumber(original_input=raw, integer=integer, numeral=encode(integer, original_input=raw))


def convert(raw: RawInput) -> ConversionResult:
    """Convert ``raw`` (numeral or base-10 integer) into a ConvertedNumber.

    Leading and trailing whitespace is ignored; interior whitespace makes the
    input malformed. Conversion errors are returned in the result, not raised.
    """
    try:
        value = _build(raw)
    except ConversionError as exc:
        logger.info("Rejected %s", exc)
        return ConversionResult(error=exc)
    return ConversionResult(value=value)
