"""Tests for the HTTP boundary using Flask's test client."""

import pytest
import requests

from conftest import envelope, make_response
from flightlookup.app import create_app
from flightlookup.config import AppConfig, AviationStackConfig
from flightlookup.services.aviationstack import AviationStackClient
from flightlookup.services.flight_lookup import FlightLookupService


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        aviationstack=AviationStackConfig(api_key="test-key", base_url="https://upstream.test/v1"),
        secret_key="test",
        debug=False,
    )


@pytest.fixture
def http(app_config: AppConfig, client: AviationStackClient):
    app = create_app(app_config=app_config, lookup_service=FlightLookupService(client))
    app.config["TESTING"] = True
    return app.test_client()


class TestSearchEndpoint:
    """Tests for GET /api/flights in search mode."""

    def test_no_parameters(self, http, client: AviationStackClient) -> None:
        resp = http.get("/api/flights")

        assert resp.status_code == 400
        assert resp.get_json() == {"error": "At least one search parameter is required"}
        client.session.get.assert_not_called()

    def test_route_search(self, http, client: AviationStackClient, ua1_flight: dict, codeshare_flight: dict) -> None:
        client.session.get.return_value = make_response(envelope(ua1_flight, codeshare_flight))

        resp = http.get("/api/flights?departure=JFK&arrival=LAX&date=2024-05-01")

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["success"] is True
        assert body["count"] == 2
        assert [f["flightNumber"] for f in body["flights"]] == ["UA", "LH523"]
        assert body["flights"][1]["departure"]["delay"] == 0
        assert body["flights"][0]["arrival"]["delay"] is None

    def test_flight_iata_alias(self, http, client: AviationStackClient) -> None:
        resp = http.get("/api/flights?flightIata=ua1")

        assert resp.status_code == 200
        assert client.session.get.call_args[1]["params"]["flight_iata"] == "UA1"

    def test_upstream_error(self, http, client: AviationStackClient) -> None:
        client.session.get.return_value = make_response(status_code=500)

        resp = http.get("/api/flights?departure=JFK")

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "API request failed: 500"}

    def test_transport_error(self, http, client: AviationStackClient) -> None:
        client.session.get.side_effect = requests.exceptions.ConnectionError("Name or service not known")

        resp = http.get("/api/flights?departure=JFK")

        assert resp.status_code == 500
        assert "error" in resp.get_json()

    def test_transport_error_hides_access_key(self, http, client: AviationStackClient, caplog) -> None:
        client.session.get.side_effect = requests.exceptions.ConnectionError(
            "HTTPConnectionPool(host='upstream.test', port=443): Max retries exceeded with url: "
            "/v1/flights?access_key=test-key&dep_iata=JFK&limit=20"
        )

        resp = http.get("/api/flights?departure=JFK")

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Flight API request failed"}
        assert "test-key" not in resp.get_data(as_text=True)
        assert "test-key" not in caplog.text

    def test_short_date_is_zero_padded(self, http, client: AviationStackClient) -> None:
        resp = http.get("/api/flights?departure=JFK&date=2024-5-1")

        assert resp.status_code == 200
        assert client.session.get.call_args[1]["params"]["flight_date"] == "2024-05-01"

    def test_missing_credential_warns_once(self, caplog) -> None:
        cfg = AppConfig(
            aviationstack=AviationStackConfig(api_key=None),
            secret_key="test",
            debug=False,
        )

        with caplog.at_level("WARNING"):
            create_app(app_config=cfg)

        warnings = [r for r in caplog.records if r.levelname == "WARNING" and r.name.startswith("flightlookup")]
        assert len(warnings) == 1
        assert "AVIATIONSTACK_API_KEY" in warnings[0].getMessage()

    def test_missing_credential(self, client: AviationStackClient) -> None:
        client.api_key = None
        app = create_app(lookup_service=FlightLookupService(client))

        resp = app.test_client().get("/api/flights?departure=JFK")

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Flight API key is not configured"}
        client.session.get.assert_not_called()


class TestTrackEndpoint:
    """Tests for GET /api/flights?query= and /api/flights/<flight_number>."""

    def test_blank_query(self, http, client: AviationStackClient) -> None:
        resp = http.get("/api/flights?query=")

        assert resp.status_code == 200
        assert resp.get_json() == []
        client.session.get.assert_not_called()

    def test_found(self, http, client: AviationStackClient, ua1_flight: dict) -> None:
        client.session.get.return_value = make_response(envelope(ua1_flight))

        resp = http.get("/api/flights?query=ua1")

        assert resp.status_code == 200
        body = resp.get_json()
        assert len(body) == 1
        assert body[0]["airline"] == "United Airlines"
        assert body[0]["aircraft"] == "B77W"
        assert client.session.get.call_args[1]["params"]["limit"] == 1

    def test_not_found(self, http) -> None:
        resp = http.get("/api/flights?query=ZZ999")

        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Flight not found"}

    def test_path_lookup(self, http, client: AviationStackClient, ua1_flight: dict) -> None:
        client.session.get.return_value = make_response(envelope(ua1_flight))

        resp = http.get("/api/flights/UA1")

        assert resp.status_code == 200
        assert resp.get_json()[0]["departure"]["code"] == "JFK"


class TestMiscEndpoints:
    """Tests for health and status."""

    def test_health(self, http) -> None:
        assert http.get("/health").get_json() == {"status": "ok"}

    def test_status(self, http, client: AviationStackClient) -> None:
        http.get("/api/flights?departure=JFK")

        body = http.get("/api/status").get_json()

        assert body["upstream"] == {"configured": True, "base_url": "https://upstream.test/v1"}
        assert body["client"] == {"requests": 1, "failures": 0}

    def test_unknown_route(self, http) -> None:
        resp = http.get("/nowhere")

        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Not found"}
