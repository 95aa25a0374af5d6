"""Tests for the football-data.org and Guardian clients against MockTransport."""

from __future__ import annotations

import httpx
import pytest

from errors import (
    AuthOrRateLimitError,
    InvalidPayloadError,
    RateLimitError,
    TransportError,
    UpstreamError,
)
from services.football_data import FootballDataClient
from services.guardian import SHOW_FIELDS, GuardianClient


def _football(handler, api_key: str | None = "secret") -> FootballDataClient:
    return FootballDataClient(api_key, transport=httpx.MockTransport(handler))


def _guardian(handler, api_key: str | None = "g-secret") -> GuardianClient:
    return GuardianClient(api_key, transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# football-data.org
# ---------------------------------------------------------------------------

async def test_fetch_resource_sends_token_and_returns_json():
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"standings": [{"type": "TOTAL"}]})

    client = _football(handler)
    data = await client.fetch_resource("/competitions/PL/standings", {"season": 2024})
    await client.close()

    assert data == {"standings": [{"type": "TOTAL"}]}
    assert seen[0].headers["X-Auth-Token"] == "secret"
    assert seen[0].url.path == "/v4/competitions/PL/standings"
    assert seen[0].url.params["season"] == "2024"


async def test_missing_token_still_calls_upstream(caplog):
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    client = _football(handler, api_key=None)
    await client.fetch_resource("/competitions/PL")

    assert len(seen) == 1
    assert seen[0].headers["X-Auth-Token"] == ""
    assert "No football-data.org API key" in caplog.text


@pytest.mark.parametrize(
    "status, error",
    [
        (403, AuthOrRateLimitError),
        (429, RateLimitError),
        (500, UpstreamError),
        (404, UpstreamError),
        (301, UpstreamError),
        (302, UpstreamError),
        (304, UpstreamError),
    ],
)
async def test_error_statuses_map_to_typed_errors(status, error):
    client = _football(lambda request: httpx.Response(status))
    with pytest.raises(error):
        await client.fetch_resource("/competitions/PL/matches")


async def test_upstream_error_carries_status_and_reason():
    client = _football(lambda request: httpx.Response(503))
    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_resource("/competitions/PL/scorers")

    assert exc_info.value.upstream_status == 503
    assert exc_info.value.reason == "Service Unavailable"
    assert str(exc_info.value) == "API returned 503: Service Unavailable"


async def test_network_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("name resolution failed", request=request)

    client = _football(handler)
    with pytest.raises(TransportError, match="name resolution failed"):
        await client.fetch_resource("/competitions/PL/teams")


async def test_non_json_body_is_invalid_payload():
    client = _football(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
    with pytest.raises(InvalidPayloadError):
        await client.fetch_resource("/competitions/PL/standings")


async def test_decoding_failure_is_invalid_payload():
    def handler(request):
        raise httpx.DecodingError("invalid gzip stream", request=request)

    client = _football(handler)
    with pytest.raises(InvalidPayloadError, match="invalid gzip stream"):
        await client.fetch_resource("/competitions/PL/standings")


# ---------------------------------------------------------------------------
# Guardian
# ---------------------------------------------------------------------------

async def test_guardian_search_adds_fields_and_defaults():
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"response": {"total": 1, "results": [{"id": "a"}]}})

    client = _guardian(handler)
    response = await client.search('"Arsenal"', {"order-by": "newest"})
    await client.close()

    assert response == {"total": 1, "results": [{"id": "a"}]}
    params = seen[0].url.params
    assert params["q"] == '"Arsenal"'
    assert params["api-key"] == "g-secret"
    assert params["show-fields"] == SHOW_FIELDS
    assert params["section"] == "football"
    assert params["page-size"] == "5"
    assert params["order-by"] == "newest"


async def test_guardian_options_override_defaults():
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"response": {"results": []}})

    client = _guardian(handler)
    await client.search("q", {"page-size": 3, "tag": "tone/matchreports"})

    assert seen[0].url.params["page-size"] == "3"
    assert seen[0].url.params["tag"] == "tone/matchreports"


async def test_guardian_without_key_returns_none_without_calling():
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    client = _guardian(handler, api_key=None)
    assert await client.search("q") is None
    assert seen == []


async def test_guardian_http_error_returns_none():
    client = _guardian(lambda request: httpx.Response(401, json={"message": "bad key"}))
    assert await client.search("q") is None


async def test_guardian_network_error_returns_none():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    client = _guardian(handler)
    assert await client.search("q") is None


async def test_guardian_redirect_returns_none():
    client = _guardian(lambda request: httpx.Response(302, json={"moved": True}))
    assert await client.search("q") is None


async def test_guardian_non_json_returns_none():
    client = _guardian(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
    assert await client.search("q") is None
