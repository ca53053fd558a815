"""Country code system conversion."""

from addresscountry.countries.countrycodes import (
    convert_country_code,
)

__all__ = [
    "convert_country_code",
]
