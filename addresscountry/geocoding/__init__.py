"""Address geocoding and country extraction."""

from addresscountry.geocoding.geocodeapi import (
    build_resolver,
    get_default_resolver,
    clear_cache,
    resolve_country,
    resolve_address,
    resolve_countries,
)
from addresscountry.geocoding.geocodeidentity import (
    AddressCountryResolver,
    extract_country,
)
from addresscountry.geocoding.geocodeclient import (
    GoogleGeocodeClient,
    GeocodeRequestError,
    MalformedResponseError,
    parse_geocode_response,
)
from addresscountry.geocoding.geocodeconfig import (
    GeocodeConfig,
    MissingAPIKeyError,
)
from addresscountry.geocoding.addressnormalize import (
    build_address_query,
    normalize_address_query,
)
from addresscountry.geocoding.geocodetypes import (
    AddressComponent,
    GeocodeResponse,
    CountryResult,
    ResolvedAddress,
)

__all__ = [
    # Primary API
    "resolve_country",
    "resolve_address",
    "resolve_countries",
    "build_resolver",
    "get_default_resolver",
    "clear_cache",
    # Components
    "AddressCountryResolver",
    "extract_country",
    "GoogleGeocodeClient",
    "parse_geocode_response",
    "GeocodeConfig",
    "build_address_query",
    "normalize_address_query",
    # Types
    "AddressComponent",
    "GeocodeResponse",
    "CountryResult",
    "ResolvedAddress",
    # Errors
    "GeocodeRequestError",
    "MalformedResponseError",
    "MissingAPIKeyError",
]
