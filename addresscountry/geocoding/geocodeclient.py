"""Google Geocoding API client.

One HTTP GET per query against the JSON endpoint, which returns the detailed
response shape (status + results with tagged address_components). The JSON
is parsed into typed records here; nothing downstream touches raw dicts.

API: https://developers.google.com/maps/documentation/geocoding/requests-geocoding
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from addresscountry.geocoding.geocodeconfig import GeocodeConfig
from addresscountry.geocoding.geocodetypes import (
    AddressComponent,
    GeocodeResponse,
    STATUS_OK,
)

logger = logging.getLogger(__name__)


class GeocodeRequestError(Exception):
    """Network, HTTP or decoding failure for a single geocoding request."""


class MalformedResponseError(GeocodeRequestError):
    """The provider answered, but not in the expected response shape."""


def _parse_component(raw: Any, index: int) -> AddressComponent:
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"address_components[{index}] is not an object")

    long_name = raw.get("long_name")
    short_name = raw.get("short_name")
    types = raw.get("types")

    if not isinstance(long_name, str) or not isinstance(short_name, str):
        raise MalformedResponseError(f"address_components[{index}] is missing long_name/short_name")
    if not isinstance(types, list) or not types or not all(isinstance(t, str) for t in types):
        raise MalformedResponseError(f"address_components[{index}] has no usable types list")

    return AddressComponent(long_name=long_name, short_name=short_name, types=tuple(types))


def parse_geocode_response(payload: Any) -> GeocodeResponse:
    """Parse a Geocoding API JSON payload into a GeocodeResponse.

    Only the first (best) result's components are kept. A non-OK status is
    returned as-is with no components; it is not an error.

    Args:
        payload: Decoded JSON body

    Returns:
        GeocodeResponse

    Raises:
        MalformedResponseError: If the payload does not have the documented shape

    Examples:
        >>> parse_geocode_response({"status": "ZERO_RESULTS", "results": []}).status
        'ZERO_RESULTS'
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("response body is not a JSON object")

    status = payload.get("status")
    if not isinstance(status, str) or not status:
        raise MalformedResponseError("response has no status")

    error_message = payload.get("error_message")
    if status != STATUS_OK:
        return GeocodeResponse(status=status, error_message=error_message)

    results = payload.get("results")
    if not isinstance(results, list):
        raise MalformedResponseError("response results is not a list")
    if not results:
        return GeocodeResponse(status=status, error_message=error_message)

    best = results[0]
    if not isinstance(best, dict):
        raise MalformedResponseError("results[0] is not an object")

    raw_components = best.get("address_components")
    if not isinstance(raw_components, list):
        raise MalformedResponseError("results[0] has no address_components list")

    components = tuple(_parse_component(c, i) for i, c in enumerate(raw_components))
    formatted = best.get("formatted_address")

    return GeocodeResponse(
        status=status,
        components=components,
        formatted_address=formatted if isinstance(formatted, str) else None,
        error_message=error_message,
    )


class GoogleGeocodeClient:
    """Thin requests-based client for the Google Geocoding API.

    Holds only immutable configuration and a connection pool; each
    ``geocode()`` call is independent of every other.
    """

    def __init__(
        self,
        config: Optional[GeocodeConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ):
        self.config = config if config is not None else GeocodeConfig.from_env()
        self._api_key = self.config.require_api_key()
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def __enter__(self) -> "GoogleGeocodeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _params(self, query: str) -> Dict[str, str]:
        params = {"address": query, "key": self._api_key}
        if self.config.language:
            params["language"] = self.config.language
        if self.config.region:
            params["region"] = self.config.region
        return params

    def geocode(self, query: str) -> GeocodeResponse:
        """Geocode one address query.

        Args:
            query: Normalized, non-empty address string

        Returns:
            GeocodeResponse (possibly with a non-OK status)

        Raises:
            GeocodeRequestError: On network/HTTP/JSON failure
            MalformedResponseError: If the body has an unexpected shape
        """
        try:
            response = self._session.get(
                self.config.base_url,
                params=self._params(query),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            # Never put the request URL in the message: it carries the key
            raise GeocodeRequestError(f"geocoding request failed: {type(e).__name__}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise GeocodeRequestError("geocoding response is not valid JSON") from e

        parsed = parse_geocode_response(payload)
        logger.debug(f"Geocoded {query!r}: status={parsed.status}, components={len(parsed.components)}")
        return parsed


__all__ = [
    "GeocodeRequestError",
    "MalformedResponseError",
    "parse_geocode_response",
    "GoogleGeocodeClient",
]
