"""Tests for the Google Geocoding API client and response parsing.

All HTTP traffic is mocked; no API key or network is needed.
"""

from unittest.mock import MagicMock

import pytest
import requests

from addresscountry.geocoding.geocodeclient import (
    GoogleGeocodeClient,
    GeocodeRequestError,
    MalformedResponseError,
    parse_geocode_response,
)
from addresscountry.geocoding.geocodeconfig import GeocodeConfig, MissingAPIKeyError
from addresscountry.geocoding.geocodetypes import AddressComponent


SINGAPORE_JSON_COMPONENTS = [
    {"long_name": "18", "short_name": "18", "types": ["street_number"]},
    {"long_name": "North Canal Road", "short_name": "N Canal Rd", "types": ["route"]},
    {"long_name": "Singapore", "short_name": "Singapore", "types": ["locality", "political"]},
    {"long_name": "Central Region", "short_name": "Central Region", "types": ["administrative_area_level_1", "political"]},
    {"long_name": "Singapore", "short_name": "SG", "types": ["country", "political"]},
    {"long_name": "048830", "short_name": "048830", "types": ["postal_code"]},
]


def make_session(payload=None, *, status_code=200, json_error=None, get_error=None):
    """Mock requests.Session whose get() returns one canned response."""
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload

    session = MagicMock(spec=requests.Session)
    if get_error is not None:
        session.get.side_effect = get_error
    else:
        session.get.return_value = response
    return session


@pytest.fixture
def config():
    return GeocodeConfig(api_key="test-key", timeout=5.0)


class TestParseGeocodeResponse:

    def test_ok_payload(self, google_payload):
        parsed = parse_geocode_response(google_payload(SINGAPORE_JSON_COMPONENTS))
        assert parsed.status == "OK"
        assert parsed.ok
        assert len(parsed.components) == 6
        assert parsed.components[4] == AddressComponent("Singapore", "SG", ("country", "political"))
        assert parsed.formatted_address == "formatted"

    def test_only_first_result_used(self, google_payload):
        payload = google_payload(SINGAPORE_JSON_COMPONENTS)
        payload["results"].append({
            "address_components": [{"long_name": "Malaysia", "short_name": "MY", "types": ["country"]}],
        })
        parsed = parse_geocode_response(payload)
        assert [c.short_name for c in parsed.components if c.has_type("country")] == ["SG"]

    def test_zero_results(self, google_payload):
        parsed = parse_geocode_response(google_payload(status="ZERO_RESULTS"))
        assert parsed.status == "ZERO_RESULTS"
        assert parsed.components == ()

    def test_error_status_keeps_message(self):
        parsed = parse_geocode_response({
            "status": "REQUEST_DENIED",
            "error_message": "The provided API key is invalid.",
            "results": [],
        })
        assert parsed.status == "REQUEST_DENIED"
        assert parsed.error_message == "The provided API key is invalid."

    def test_ok_with_empty_results(self, google_payload):
        parsed = parse_geocode_response(google_payload())
        assert parsed.ok
        assert parsed.components == ()

    @pytest.mark.parametrize("payload", [
        None,
        [],
        "OK",
        {},
        {"status": ""},
        {"status": "OK", "results": "nope"},
        {"status": "OK", "results": ["nope"]},
        {"status": "OK", "results": [{}]},
        {"status": "OK", "results": [{"address_components": {}}]},
    ])
    def test_malformed_shapes(self, payload):
        with pytest.raises(MalformedResponseError):
            parse_geocode_response(payload)

    @pytest.mark.parametrize("bad_component", [
        "Singapore",
        {"short_name": "SG", "types": ["country"]},
        {"long_name": "Singapore", "types": ["country"]},
        {"long_name": "Singapore", "short_name": "SG"},
        {"long_name": "Singapore", "short_name": "SG", "types": []},
        {"long_name": "Singapore", "short_name": "SG", "types": "country"},
        {"long_name": "Singapore", "short_name": "SG", "types": [1]},
    ])
    def test_malformed_components(self, google_payload, bad_component):
        with pytest.raises(MalformedResponseError):
            parse_geocode_response(google_payload(SINGAPORE_JSON_COMPONENTS[:2] + [bad_component]))

    def test_malformed_is_a_request_error(self):
        assert issubclass(MalformedResponseError, GeocodeRequestError)


class TestGoogleGeocodeClient:

    def test_requires_api_key(self):
        with pytest.raises(MissingAPIKeyError):
            GoogleGeocodeClient(GeocodeConfig(api_key=None), session=make_session({}))

    def test_request_parameters(self, config, google_payload):
        session = make_session(google_payload(SINGAPORE_JSON_COMPONENTS))
        client = GoogleGeocodeClient(config, session=session)

        client.geocode("18N CanalRd Singapore 48830")

        session.get.assert_called_once_with(
            "https://maps.googleapis.com/maps/api/geocode/json",
            params={"address": "18N CanalRd Singapore 48830", "key": "test-key"},
            timeout=5.0,
        )

    def test_language_and_region(self, google_payload):
        config = GeocodeConfig(api_key="k", language="en", region="sg")
        session = make_session(google_payload(SINGAPORE_JSON_COMPONENTS))
        GoogleGeocodeClient(config, session=session).geocode("Singapore")

        params = session.get.call_args.kwargs["params"]
        assert params["language"] == "en"
        assert params["region"] == "sg"

    def test_returns_parsed_response(self, config, google_payload):
        session = make_session(google_payload(SINGAPORE_JSON_COMPONENTS))
        parsed = GoogleGeocodeClient(config, session=session).geocode("18N CanalRd Singapore 48830")
        assert parsed.ok
        assert any(c.has_type("country") for c in parsed.components)

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.Timeout("timed out"),
    ])
    def test_network_errors(self, config, error):
        client = GoogleGeocodeClient(config, session=make_session(get_error=error))
        with pytest.raises(GeocodeRequestError):
            client.geocode("Singapore")

    def test_http_error(self, config):
        client = GoogleGeocodeClient(config, session=make_session({}, status_code=503))
        with pytest.raises(GeocodeRequestError):
            client.geocode("Singapore")

    def test_invalid_json(self, config):
        client = GoogleGeocodeClient(config, session=make_session(json_error=ValueError("Expecting value")))
        with pytest.raises(GeocodeRequestError):
            client.geocode("Singapore")

    def test_error_message_does_not_leak_key(self, config):
        error = requests.exceptions.ConnectionError("https://maps.googleapis.com/...&key=test-key")
        client = GoogleGeocodeClient(config, session=make_session(get_error=error))
        with pytest.raises(GeocodeRequestError) as excinfo:
            client.geocode("Singapore")
        assert "test-key" not in str(excinfo.value)

    def test_malformed_body(self, config):
        client = GoogleGeocodeClient(config, session=make_session({"results": []}))
        with pytest.raises(MalformedResponseError):
            client.geocode("Singapore")

    def test_context_manager_closes_owned_session(self, config, monkeypatch):
        closed = []
        monkeypatch.setattr(requests.Session, "close", lambda self: closed.append(True))
        with GoogleGeocodeClient(config):
            pass
        assert closed == [True]

    def test_injected_session_not_closed(self, config):
        session = make_session({})
        with GoogleGeocodeClient(config, session=session):
            pass
        session.close.assert_not_called()
