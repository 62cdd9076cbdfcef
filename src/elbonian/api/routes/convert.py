"""Conversion endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from elbonian.models.converted_number import convert as convert_number
from elbonian.numerals.symbols import MAX_VALUE, iter_symbols

router = APIRouter(tags=["convert"])


@router.get("/convert")
async def convert(number: str = Query("", description="Elbonian numeral or base-10 integer")) -> dict:
    """Return both forms of ``number``."""
    result = convert_number(number)
    if not result.ok:
        error = result.error
        raise HTTPException(
            status_code=422,
            detail={
                "error": type(error).__name__,
                "input": error.original_input,
                "message": str(error),
            },
        )
    value = result.unwrap()
    return {"input": number, "integer": value.to_integer(), "numeral": value.to_numeral()}


@router.get("/symbols")
async def symbols() -> dict:
    """Return the symbol table in table order."""
    return {
        "symbols": [entry.model_dump() for entry in iter_symbols()],
        "max_value": MAX_VALUE,
    }
