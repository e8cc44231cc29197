"""Tests for the HTTP provider client."""

from __future__ import annotations

import pytest
import requests
import responses

from domain.config import ProviderParameters
from providers.client import ProviderClient
from providers.errors import ProviderError

BASE_URL = "http://provider.test/api/v2"


def _client(**overrides) -> ProviderClient:
    params = ProviderParameters(base_url=BASE_URL, auth_key_env="TEST_TBA_KEY", **overrides)
    return ProviderClient(params)


@responses.activate
def test_get_event_list_sends_app_id_header(monkeypatch) -> None:
    monkeypatch.delenv("TEST_TBA_KEY", raising=False)
    responses.add(
        responses.GET,
        f"{BASE_URL}/events/2015",
        json=[{"event_code": "casj", "year": 2015}, "junk"],
        status=200,
    )

    with _client(app_id="tester:app:1") as client:
        events = client.get_event_list(2015)

    assert events == [{"event_code": "casj", "year": 2015}]
    request = responses.calls[0].request
    assert request.headers["X-TBA-App-Id"] == "tester:app:1"
    assert "X-TBA-Auth-Key" not in request.headers


@responses.activate
def test_auth_key_header_is_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TEST_TBA_KEY", "secret")
    responses.add(responses.GET, f"{BASE_URL}/events/2016", json=[], status=200)

    with _client() as client:
        client.get_event_list(2016)

    assert responses.calls[0].request.headers["X-TBA-Auth-Key"] == "secret"


@responses.activate
def test_get_event_rankings_returns_rows_with_header() -> None:
    rows = [["Rank", "Team", "Auto"], [1, "254", 40]]
    responses.add(responses.GET, f"{BASE_URL}/event/2015casj/rankings", json=rows, status=200)

    with _client() as client:
        assert client.get_event_rankings("casj", 2015) == rows


@responses.activate
def test_null_rankings_payload_is_empty() -> None:
    responses.add(responses.GET, f"{BASE_URL}/event/2015casj/rankings", body="null", content_type="application/json", status=200)

    with _client() as client:
        assert client.get_event_rankings("casj", 2015) == []


@responses.activate
def test_http_error_raises_provider_error() -> None:
    responses.add(responses.GET, f"{BASE_URL}/events/2015", body="nope", status=404)

    with _client() as client:
        with pytest.raises(ProviderError, match="404") as exc_info:
            client.get_event_list(2015)
    assert exc_info.value.status_code == 404


@responses.activate
def test_transport_error_raises_provider_error() -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/events/2015",
        body=requests.ConnectionError("connection refused"),
    )

    with _client() as client:
        with pytest.raises(ProviderError, match="connection refused"):
            client.get_event_list(2015)


@responses.activate
def test_non_list_event_payload_raises() -> None:
    responses.add(responses.GET, f"{BASE_URL}/events/2015", json={"error": "x"}, status=200)

    with _client() as client:
        with pytest.raises(ProviderError, match="not a JSON array"):
            client.get_event_list(2015)
