"""
Location lookup endpoints.

Lets the frontend fill in the municipality as soon as a postal code is typed.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from .exceptions import InvalidPostalCodeError
from .postal_codes import (
    all_municipalities,
    is_valid_postal_code,
    municipality_for_postal_code,
    normalize_postal_code,
)

router = APIRouter()


class PostalCodeLookupResponse(BaseModel):
    """Result of resolving one postal code."""

    postal_code: str
    municipality: Optional[str] = None


@router.get("/postal-codes/{postal_code}", response_model=PostalCodeLookupResponse)
async def lookup_postal_code(postal_code: str) -> PostalCodeLookupResponse:
    """
    Resolve a postal code to its municipality.

    Unknown codes return ``municipality: null`` rather than 404.
    """
    if not is_valid_postal_code(postal_code):
        raise InvalidPostalCodeError(postal_code)

    municipality = municipality_for_postal_code(postal_code)
    return PostalCodeLookupResponse(
        postal_code=normalize_postal_code(postal_code),
        municipality=municipality or None,
    )


@router.get("/municipalities", response_model=list[str])
async def list_municipalities() -> list[str]:
    """List municipalities known to the postal code table."""
    return all_municipalities()
