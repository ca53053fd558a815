"""Typed records for geocoding requests and results.

The provider's JSON is parsed into these records once, at the client
boundary. Everything downstream (country extraction, batch joins) works on
the typed records and never indexes into raw dictionaries.

Response shape mirrored here::

    GeocodeResponse
      status: "OK" | "ZERO_RESULTS" | "OVER_QUERY_LIMIT" | ...
      components: (AddressComponent, ...)   # from the best result
        long_name:  "Singapore"
        short_name: "SG"
        types:      ("country", "political")
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


# Provider statuses (Google Geocoding API)
STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"

# Resolver outcomes that never come from the provider
STATUS_NO_COUNTRY = "NO_COUNTRY"
STATUS_REQUEST_FAILED = "REQUEST_FAILED"
STATUS_MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
STATUS_EMPTY_QUERY = "EMPTY_QUERY"

COUNTRY_TAG = "country"


@dataclass(frozen=True)
class AddressComponent:
    """One tagged facet of a geocoded address (street, locality, country, ...)."""

    long_name: str
    short_name: str
    types: Tuple[str, ...]

    def has_type(self, tag: str) -> bool:
        return tag in self.types


@dataclass(frozen=True)
class GeocodeResponse:
    """Provider status plus the ordered component list of the best result."""

    status: str
    components: Tuple[AddressComponent, ...] = ()
    formatted_address: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


@dataclass(frozen=True)
class CountryResult:
    """Country long name and short code, e.g. ('Singapore', 'SG')."""

    long_name: str
    short_code: str


@dataclass(frozen=True)
class ResolvedAddress:
    """Outcome of resolving one query.

    ``country`` is None whenever no country could be determined; ``status``
    says why (provider status, NO_COUNTRY, REQUEST_FAILED, ...).
    """

    query: str
    normalized_query: str
    country: Optional[CountryResult]
    status: str

    @property
    def found(self) -> bool:
        return self.country is not None

    @property
    def needs_review(self) -> bool:
        return self.country is None


__all__ = [
    "STATUS_OK",
    "STATUS_ZERO_RESULTS",
    "STATUS_NO_COUNTRY",
    "STATUS_REQUEST_FAILED",
    "STATUS_MALFORMED_RESPONSE",
    "STATUS_EMPTY_QUERY",
    "COUNTRY_TAG",
    "AddressComponent",
    "GeocodeResponse",
    "CountryResult",
    "ResolvedAddress",
]
