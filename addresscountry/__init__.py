"""Address Country - country extraction from free-text addresses

Public API for resolving unstructured address strings (e.g. address fields of
financial messages) to a standardized country name and ISO code, using the
Google Geocoding API.

Usage:
    from addresscountry import resolve_country, resolve_address, resolve_dataframe

    # Country of one address
    country = resolve_country("18N CanalRd Singapore 48830")
    # Returns: CountryResult(long_name='Singapore', short_code='SG')

    # Full outcome, including why no country was found
    resolved = resolve_address("Cra. 13 #8525 BogotáColombia")
    # resolved.normalized_query == 'Cra. 13 8525 BogotaColombia'

    # Deduplicated batch over a DataFrame of address lines
    out = resolve_dataframe(df, ["addr1", "addr2", "addr3"], iso3=True)

The API key is read from ADDRESSCOUNTRY_API_KEY (or GOOGLE_MAPS_API_KEY).
"""

__version__ = "0.0.1"

# ============================================================================
# Address Resolution API
# ============================================================================

from .geocoding.geocodeapi import (
    resolve_country,      # Primary API - address -> CountryResult or None
    resolve_address,      # Address -> ResolvedAddress (with status)
    resolve_countries,    # Resolve several addresses in order
    build_resolver,       # Resolver from an explicit GeocodeConfig
    clear_cache,          # Drop the cached default resolver
)

from .geocoding.geocodeidentity import (
    AddressCountryResolver,  # normalize -> geocode -> extract
    extract_country,         # First country-tagged component of a response
)

from .geocoding.addressnormalize import (
    build_address_query,      # Join address-line fields into one query
    normalize_address_query,  # Lossy cleanup before the provider call
)

from .geocoding.geocodeconfig import (
    GeocodeConfig,
    MissingAPIKeyError,
)

from .geocoding.geocodeclient import (
    GoogleGeocodeClient,
    GeocodeRequestError,
    MalformedResponseError,
)

from .geocoding.geocodetypes import (
    AddressComponent,
    GeocodeResponse,
    CountryResult,
    ResolvedAddress,
)

# ============================================================================
# Batch API
# ============================================================================

from .batch.batchapi import (
    resolve_queries,        # Dedupe + resolve an iterable of queries
    resolve_dataframe,      # Dedupe + resolve + join back onto a DataFrame
    summarize_resolutions,  # Status counts for review triage
)

# ============================================================================
# Country Codes
# ============================================================================

from .countries.countrycodes import (
    convert_country_code,   # ISO2 -> ISO3 / numeric
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "resolve_country",
    "resolve_address",
    "resolve_dataframe",

    # ========================================================================
    # Resolution
    # ========================================================================
    "resolve_countries",
    "build_resolver",
    "clear_cache",
    "AddressCountryResolver",
    "extract_country",
    "build_address_query",
    "normalize_address_query",

    # ========================================================================
    # Configuration & client
    # ========================================================================
    "GeocodeConfig",
    "GoogleGeocodeClient",

    # ========================================================================
    # Types
    # ========================================================================
    "AddressComponent",
    "GeocodeResponse",
    "CountryResult",
    "ResolvedAddress",

    # ========================================================================
    # Errors
    # ========================================================================
    "MissingAPIKeyError",
    "GeocodeRequestError",
    "MalformedResponseError",

    # ========================================================================
    # Batch
    # ========================================================================
    "resolve_queries",
    "summarize_resolutions",

    # ========================================================================
    # Country Codes
    # ========================================================================
    "convert_country_code",
]
