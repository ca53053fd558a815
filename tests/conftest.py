"""Shared test fixtures and utilities for addresscountry tests."""

import pytest
from typing import Callable, Dict, List, Optional

from addresscountry.geocoding.geocodeclient import GeocodeRequestError
from addresscountry.geocoding.geocodeidentity import AddressCountryResolver
from addresscountry.geocoding.geocodetypes import AddressComponent, GeocodeResponse


def component(long_name: str, short_name: str, *types: str) -> AddressComponent:
    """Build an AddressComponent with the given tags."""
    return AddressComponent(long_name=long_name, short_name=short_name, types=tuple(types))


SINGAPORE_COMPONENTS = (
    component("18", "18", "street_number"),
    component("North Canal Road", "N Canal Rd", "route"),
    component("Singapore", "SG", "country", "political"),
    component("Central Region", "Central Region", "administrative_area_level_1", "political"),
    component("Singapore", "Singapore", "locality", "political"),
    component("048830", "048830", "postal_code"),
)

BOGOTA_COMPONENTS = (
    component("8525", "8525", "street_number"),
    component("Carrera 13", "Cra. 13", "route"),
    component("Bogotá", "Bogotá", "locality", "political"),
    component("Bogotá, D.C.", "Bogotá, D.C.", "administrative_area_level_1", "political"),
    component("Colombia", "CO", "country", "political"),
)


class FakeGeocoder:
    """In-memory geocoder: maps query -> response (or exception).

    Records every query it receives so tests can count provider calls.
    Unknown queries get ZERO_RESULTS.
    """

    def __init__(self, responses: Optional[Dict[str, object]] = None):
        self.responses = dict(responses or {})
        self.calls: List[str] = []

    def geocode(self, query: str) -> GeocodeResponse:
        self.calls.append(query)
        outcome = self.responses.get(query, GeocodeResponse(status="ZERO_RESULTS"))
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return outcome(query)
        return outcome


@pytest.fixture
def singapore_response() -> GeocodeResponse:
    """OK response with the country component among five others."""
    return GeocodeResponse(
        status="OK",
        components=SINGAPORE_COMPONENTS,
        formatted_address="18 N Canal Rd, Singapore 048830",
    )


@pytest.fixture
def bogota_response() -> GeocodeResponse:
    return GeocodeResponse(status="OK", components=BOGOTA_COMPONENTS)


@pytest.fixture
def fake_geocoder(singapore_response, bogota_response) -> FakeGeocoder:
    """Geocoder that knows the two example addresses and fails on one."""
    return FakeGeocoder({
        "18N CanalRd Singapore 48830": singapore_response,
        "Cra. 13 8525 BogotaColombia": bogota_response,
        "Broken Street 1": GeocodeRequestError("geocoding request failed: ConnectionError"),
    })


@pytest.fixture
def resolver(fake_geocoder) -> AddressCountryResolver:
    return AddressCountryResolver(fake_geocoder)


@pytest.fixture
def google_payload() -> Callable[..., dict]:
    """Factory for Geocoding API JSON payloads."""

    def make(components: Optional[list] = None, status: str = "OK", **extra) -> dict:
        payload = {"status": status, "results": []}
        if components is not None:
            payload["results"] = [{
                "address_components": components,
                "formatted_address": "formatted",
                "geometry": {"location": {"lat": 1.29, "lng": 103.85}},
                "types": ["street_address"],
            }]
        payload.update(extra)
        return payload

    return make


@pytest.fixture
def geocoder_factory() -> Callable[..., FakeGeocoder]:
    """FakeGeocoder class, for tests that need their own response table."""
    return FakeGeocoder


@pytest.fixture
def make_component() -> Callable[..., AddressComponent]:
    return component
