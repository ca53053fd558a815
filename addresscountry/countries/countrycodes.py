"""
Country Code Systems
--------------------

The geocoder's country short code is ISO 3166-1 alpha-2. Screening lists
often key on alpha-3 or numeric codes instead, so this module converts
between them with pycountry.

Examples:
  >>> convert_country_code("SG", to="ISO3")   # 'SGP'
  >>> convert_country_code("af", to="numeric")  # '004'
  >>> convert_country_code("XK", to="ISO3")   # 'XKX' (user-assigned Kosovo)
"""

from __future__ import annotations
from typing import Optional

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e


CODE_SYSTEMS = ("ISO2", "ISO3", "NUMERIC")

# User-assigned code used by the geocoder for Kosovo; not in ISO 3166, so no numeric code
_KOSOVO = {"ISO2": "XK", "ISO3": "XKX", "NUMERIC": None}


def convert_country_code(alpha2: Optional[str], to: str = "ISO2") -> Optional[str]:
    """Convert an ISO 3166-1 alpha-2 code into another code system.

    Args:
        alpha2: Two-letter code, case-insensitive (e.g. "SG", "co")
        to: 'ISO2' (default), 'ISO3', or 'numeric'

    Returns:
        Code in the requested system, or None if alpha2 is not a known country

    Raises:
        ValueError: If ``to`` is not a supported code system
    """
    target = to.upper()
    if target == "NUM":
        target = "NUMERIC"
    if target not in CODE_SYSTEMS:
        raise ValueError(f"Unsupported code system {to!r}. Use one of {CODE_SYSTEMS}")

    if not alpha2 or not str(alpha2).strip():
        return None
    code = str(alpha2).strip().upper()

    if code == _KOSOVO["ISO2"]:
        return _KOSOVO[target]

    country = pycountry.countries.get(alpha_2=code)
    if country is None:
        return None

    if target == "ISO2":
        return country.alpha_2
    elif target == "ISO3":
        return getattr(country, "alpha_3", None)
    else:
        num = getattr(country, "numeric", None)
        # Leading zeros preserved (e.g. '004' for Afghanistan)
        return f"{int(num):03d}" if num is not None else None


__all__ = [
    "CODE_SYSTEMS",
    "convert_country_code",
]
