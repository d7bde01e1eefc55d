"""
Norwegian postal code to municipality resolution.

Resolution is a two-step lookup:

1. Exact match against a static table of city-centre postal codes.
2. Fallback to hand-curated half-open numeric ranges per postal district.

The ranges are deliberately non-exhaustive. A code outside every range
resolves to an empty string, which callers treat as "leave municipality
unset". This module does not validate input: enforcing the ``[0-9]{4}``
pattern is the caller's job.
"""

import re
from typing import Iterable, NamedTuple


def _codes(*parts: Iterable[int] | int) -> list[int]:
    """Flatten ints and ranges into a list of numeric postal codes."""
    codes: list[int] = []
    for part in parts:
        if isinstance(part, int):
            codes.append(part)
        else:
            codes.extend(part)
    return codes


# Inclusive upper bounds are written as range(start, stop + 1) for readability.
_CITY_CENTRE_CODES: dict[str, list[int]] = {
    "Oslo": _codes(
        10, 15, 18, 21, range(24, 29), range(30, 35), 37, 40, 42, 43,
        range(45, 49), 50, 51, 55, range(101, 108), 110, range(112, 126),
        range(128, 140), range(150, 156), range(157, 189), range(190, 197), 198,
    ),
    "Bergen": _codes(range(5003, 5023)),
    "Trondheim": _codes(range(7010, 7017), range(7018, 7031)),
    "Stavanger": _codes(range(4001, 4017)),
    "Kristiansand": _codes(range(4604, 4607), range(4608, 4617)),
    "Tromsø": _codes(range(9006, 9018)),
    "Drammen": _codes(range(3001, 3009)),
    "Fredrikstad": _codes(range(1601, 1610)),
    "Sandnes": _codes(range(4301, 4309)),
    "Sarpsborg": _codes(range(1701, 1710)),
    "Skien": _codes(range(3701, 3709)),
    "Ålesund": _codes(range(6001, 6009)),
    "Tønsberg": _codes(range(3101, 3109)),
    "Haugesund": _codes(range(5501, 5509)),
    "Sandefjord": _codes(range(3201, 3209)),
    "Bodø": _codes(range(8001, 8009)),
    "Arendal": _codes(range(4801, 4805), range(4808, 4811), 4812),
    "Hamar": _codes(range(2301, 2309)),
    "Larvik": _codes(range(3251, 3259)),
    "Halden": _codes(range(1751, 1759)),
    "Rana": _codes(range(8601, 8609)),
    "Gjøvik": _codes(range(2801, 2809)),
    "Lillehammer": _codes(range(2601, 2610)),
    "Molde": _codes(range(6401, 6409)),
    "Nordre Follo": _codes(range(1400, 1409)),
    "Asker": _codes(range(1383, 1398)),
    "Bærum": _codes(range(1340, 1372)),
}

POSTAL_CODE_TABLE: dict[str, str] = {
    f"{code:04d}": municipality
    for municipality, codes in _CITY_CENTRE_CODES.items()
    for code in codes
}


class PostalRange(NamedTuple):
    """Half-open numeric postal code range ``[start, end)``."""

    start: int
    end: int
    municipality: str

    def contains(self, code: int) -> bool:
        return self.start <= code < self.end


# Evaluated in order; the first matching range wins.
POSTAL_CODE_RANGES: tuple[PostalRange, ...] = (
    PostalRange(0, 1300, "Oslo"),
    PostalRange(1300, 1400, "Bærum"),
    PostalRange(1400, 1500, "Nordre Follo"),
    PostalRange(1500, 1600, "Lørenskog"),
    PostalRange(1600, 1700, "Fredrikstad"),
    PostalRange(1700, 1800, "Sarpsborg"),
    PostalRange(1800, 1900, "Askim"),
    PostalRange(2000, 2100, "Lillestrøm"),
    PostalRange(2300, 2400, "Hamar"),
    PostalRange(2600, 2700, "Lillehammer"),
    PostalRange(2800, 2900, "Gjøvik"),
    PostalRange(3000, 3100, "Drammen"),
    PostalRange(3100, 3200, "Tønsberg"),
    PostalRange(3200, 3300, "Sandefjord"),
    PostalRange(3700, 3800, "Skien"),
    PostalRange(4000, 4100, "Stavanger"),
    PostalRange(4300, 4400, "Sandnes"),
    PostalRange(4600, 4700, "Kristiansand"),
    PostalRange(4800, 4900, "Arendal"),
    PostalRange(5000, 5100, "Bergen"),
    PostalRange(5500, 5600, "Haugesund"),
    PostalRange(6000, 6100, "Ålesund"),
    PostalRange(6400, 6500, "Molde"),
    PostalRange(7000, 7100, "Trondheim"),
    PostalRange(8000, 8100, "Bodø"),
    PostalRange(8600, 8700, "Mo i Rana"),
    PostalRange(9000, 9100, "Tromsø"),
)

_WHITESPACE = re.compile(r"\s")
POSTAL_CODE_PATTERN = re.compile(r"^[0-9]{4}$")


def normalize_postal_code(postal_code: str) -> str:
    """Strip all whitespace and left-pad with zeros to four characters."""
    return _WHITESPACE.sub("", postal_code).rjust(4, "0")


def is_valid_postal_code(postal_code: str) -> bool:
    """True when the code is exactly four digits once whitespace is removed."""
    return bool(POSTAL_CODE_PATTERN.match(_WHITESPACE.sub("", postal_code)))


def municipality_for_postal_code(postal_code: str) -> str:
    """
    Resolve a Norwegian postal code to a municipality name.

    Args:
        postal_code: Expected to be four digits, whitespace is tolerated.

    Returns:
        Municipality name, or an empty string when the code is unknown.
    """
    code = normalize_postal_code(postal_code)

    municipality = POSTAL_CODE_TABLE.get(code)
    if municipality:
        return municipality

    # Not a number: nothing to fall back on.
    if not code.isdigit():
        return ""

    number = int(code)
    for postal_range in POSTAL_CODE_RANGES:
        if postal_range.contains(number):
            return postal_range.municipality

    return ""


def all_municipalities() -> list[str]:
    """Sorted unique municipalities present in the static table."""
    return sorted(set(POSTAL_CODE_TABLE.values()))
