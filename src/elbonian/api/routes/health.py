"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from elbonian.models.converted_number import convert
from elbonian.numerals.symbols import MAX_NUMERAL, MAX_VALUE

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready() -> dict[str, str]:
    result = convert(MAX_NUMERAL)
    if not result.ok or result.unwrap().to_integer() != MAX_VALUE:
        raise HTTPException(status_code=503, detail="self-check conversion failed")
    return {"status": "ready"}
