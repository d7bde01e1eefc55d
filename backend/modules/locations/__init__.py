"""
Locations module.

Maps Norwegian postal codes to municipalities. Pure functions, no I/O.

Public API:
- municipality_for_postal_code: Resolve a postal code ("" when unknown)
- all_municipalities: Municipalities covered by the static table
"""

from .postal_codes import (
    POSTAL_CODE_TABLE,
    POSTAL_CODE_RANGES,
    PostalRange,
    municipality_for_postal_code,
    normalize_postal_code,
    is_valid_postal_code,
    all_municipalities,
)
from .exceptions import InvalidPostalCodeError

__all__ = [
    "POSTAL_CODE_TABLE",
    "POSTAL_CODE_RANGES",
    "PostalRange",
    "municipality_for_postal_code",
    "normalize_postal_code",
    "is_valid_postal_code",
    "all_municipalities",
    "InvalidPostalCodeError",
]
