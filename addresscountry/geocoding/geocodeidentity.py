"""
Address -> Country Resolution
-----------------------------

Pipeline per query (strictly sequential, one provider call at most):
  1) normalize_address_query   (lossy cleanup, see addressnormalize)
  2) geocoder.geocode(query)   (one external call, no retry)
  3) extract_country(response) (scan components for the "country" tag)

The country component has no fixed position in the component list: a
postal-code-only address has fewer components than a full street address.
It is therefore found by tag membership, never by offset. If several
components carry the tag, the first in response order wins.

Failures never propagate to the caller. A failed request, a malformed body,
a non-OK status and an OK response without a country component all yield
"absent" (None), with the reason recorded on ResolvedAddress.status.
"""

from __future__ import annotations
import logging
from typing import Optional, Protocol

from addresscountry.geocoding.addressnormalize import normalize_address_query
from addresscountry.geocoding.geocodeclient import (
    GeocodeRequestError,
    MalformedResponseError,
)
from addresscountry.geocoding.geocodetypes import (
    COUNTRY_TAG,
    CountryResult,
    GeocodeResponse,
    ResolvedAddress,
    STATUS_EMPTY_QUERY,
    STATUS_MALFORMED_RESPONSE,
    STATUS_NO_COUNTRY,
    STATUS_REQUEST_FAILED,
    STATUS_ZERO_RESULTS,
)

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    def geocode(self, query: str) -> GeocodeResponse: ...


def extract_country(response: GeocodeResponse) -> Optional[CountryResult]:
    """Return the first country-tagged component of a response, or None.

    Examples:
        >>> from addresscountry.geocoding.geocodetypes import AddressComponent
        >>> r = GeocodeResponse("OK", (
        ...     AddressComponent("48830", "48830", ("postal_code",)),
        ...     AddressComponent("Singapore", "SG", ("country", "political")),
        ... ))
        >>> extract_country(r)
        CountryResult(long_name='Singapore', short_code='SG')
    """
    if not response.ok or not response.components:
        return None

    for component in response.components:
        if component.has_type(COUNTRY_TAG):
            return CountryResult(long_name=component.long_name, short_code=component.short_name)

    return None


class AddressCountryResolver:
    """Resolve free-text addresses to a country via a geocoder.

    Args:
        geocoder: Any object with ``geocode(query) -> GeocodeResponse``,
                  typically a GoogleGeocodeClient

    Examples:
        >>> resolver = AddressCountryResolver(GoogleGeocodeClient())  # doctest: +SKIP
        >>> resolver.resolve("18N CanalRd Singapore 48830")           # doctest: +SKIP
        CountryResult(long_name='Singapore', short_code='SG')
    """

    def __init__(self, geocoder: Geocoder):
        self.geocoder = geocoder

    def resolve_address(self, query: str) -> ResolvedAddress:
        """Resolve one query, keeping the reason when no country is found."""
        query = (query or "").strip()
        normalized = normalize_address_query(query)

        if not normalized:
            logger.debug(f"Skipping empty address query {query!r}")
            return ResolvedAddress(query, normalized, None, STATUS_EMPTY_QUERY)

        try:
            response = self.geocoder.geocode(normalized)
        except MalformedResponseError as e:
            logger.warning(f"Malformed geocoding response for {normalized!r}: {e}")
            return ResolvedAddress(query, normalized, None, STATUS_MALFORMED_RESPONSE)
        except GeocodeRequestError as e:
            logger.warning(f"Geocoding request failed for {normalized!r}: {e}")
            return ResolvedAddress(query, normalized, None, STATUS_REQUEST_FAILED)

        if not response.ok:
            if response.status == STATUS_ZERO_RESULTS:
                logger.info(f"No geocoding results for {normalized!r}")
            else:
                detail = f" ({response.error_message})" if response.error_message else ""
                logger.warning(f"Geocoding status {response.status} for {normalized!r}{detail}")
            return ResolvedAddress(query, normalized, None, response.status)

        country = extract_country(response)
        if country is None:
            logger.debug(f"No country component for {normalized!r} ({len(response.components)} components)")
            return ResolvedAddress(query, normalized, None, STATUS_NO_COUNTRY)

        return ResolvedAddress(query, normalized, country, response.status)

    def resolve(self, query: str) -> Optional[CountryResult]:
        """Resolve one query to a CountryResult, or None if absent."""
        return self.resolve_address(query).country


__all__ = [
    "Geocoder",
    "extract_country",
    "AddressCountryResolver",
]
