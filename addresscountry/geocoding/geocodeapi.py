"""Address -> country resolution API.

Public API for resolving free-text addresses to a country. This wraps
AddressCountryResolver with a default resolver configured from the
environment (see geocodeconfig), so callers who just want a country code
need one function call.
"""

import logging
from functools import lru_cache
from typing import Iterable, List, Optional

from addresscountry.geocoding.geocodeclient import GoogleGeocodeClient
from addresscountry.geocoding.geocodeconfig import GeocodeConfig
from addresscountry.geocoding.geocodeidentity import AddressCountryResolver
from addresscountry.geocoding.geocodetypes import CountryResult, ResolvedAddress

logger = logging.getLogger(__name__)


def build_resolver(config: Optional[GeocodeConfig] = None) -> AddressCountryResolver:
    """Create a resolver backed by the Google Geocoding API.

    Args:
        config: Geocoding settings. If None, read from the environment.

    Raises:
        MissingAPIKeyError: If no API key is configured
    """
    return AddressCountryResolver(GoogleGeocodeClient(config))


@lru_cache(maxsize=1)
def get_default_resolver() -> AddressCountryResolver:
    """Resolver configured from the environment, created once and reused."""
    return build_resolver()


def clear_cache():
    """Drop the cached default resolver (e.g. after changing the environment)."""
    get_default_resolver.cache_clear()
    logger.info("Cleared default resolver cache")


def resolve_country(
    query: str,
    *,
    resolver: Optional[AddressCountryResolver] = None,
) -> Optional[CountryResult]:
    """Get the country of a free-text address.

    Args:
        query: Raw address string, e.g. "18N CanalRd Singapore 48830"
        resolver: Optional resolver; defaults to get_default_resolver()

    Returns:
        CountryResult(long_name, short_code), or None if no country was found

    Examples:
        >>> resolve_country("18N CanalRd Singapore 48830")  # doctest: +SKIP
        CountryResult(long_name='Singapore', short_code='SG')

        >>> resolve_country("Cra. 13 #8525 BogotáColombia")  # doctest: +SKIP
        CountryResult(long_name='Colombia', short_code='CO')
    """
    resolver = resolver if resolver is not None else get_default_resolver()
    return resolver.resolve(query)


def resolve_address(
    query: str,
    *,
    resolver: Optional[AddressCountryResolver] = None,
) -> ResolvedAddress:
    """Resolve an address, returning the full outcome (normalized query, status).

    Use this instead of resolve_country when the reason for a missing
    country matters, e.g. to route records to manual review.
    """
    resolver = resolver if resolver is not None else get_default_resolver()
    return resolver.resolve_address(query)


def resolve_countries(
    queries: Iterable[str],
    *,
    resolver: Optional[AddressCountryResolver] = None,
) -> List[Optional[CountryResult]]:
    """Resolve several addresses, one provider call each, in input order.

    No deduplication is done here; see addresscountry.batch for the
    deduplicating batch driver.
    """
    resolver = resolver if resolver is not None else get_default_resolver()
    return [resolver.resolve(q) for q in queries]


__all__ = [
    "build_resolver",
    "get_default_resolver",
    "clear_cache",
    "resolve_country",
    "resolve_address",
    "resolve_countries",
]
