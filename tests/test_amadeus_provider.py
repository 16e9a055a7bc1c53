from urllib.parse import parse_qs

import httpx
import pytest

from app.services.providers.amadeus import (
    HOTELS_BY_GEOCODE_PATH,
    TOKEN_PATH,
    AmadeusProvider,
)
from app.services.providers.base import ProviderError, ProviderStatus

pytestmark = pytest.mark.anyio

BASE_URL = "https://test.api.amadeus.com"


def _provider(handler, **kwargs) -> AmadeusProvider:
    kwargs.setdefault("client_id", "client")
    kwargs.setdefault("client_secret", "secret")
    return AmadeusProvider(base_url=BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


async def test_fetch_access_token_runs_client_credentials_grant() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"access_token": "abc", "expires_in": 1799, "token_type": "Bearer"})

    token, expires_in = await _provider(handler).fetch_access_token()

    assert (token, expires_in) == ("abc", 1799)
    assert seen[0].method == "POST"
    assert seen[0].url.path == TOKEN_PATH
    form = parse_qs(seen[0].content.decode())
    assert form == {
        "grant_type": ["client_credentials"],
        "client_id": ["client"],
        "client_secret": ["secret"],
    }


async def test_fetch_access_token_without_credentials_makes_no_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not be called
        raise AssertionError("unexpected request")

    provider = _provider(handler, client_id="", client_secret="")

    assert provider.is_configured is False
    with pytest.raises(ProviderError):
        await provider.fetch_access_token()


async def test_fetch_access_token_rejected_credentials() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "invalid_client"})

    with pytest.raises(ProviderError) as excinfo:
        await _provider(handler).fetch_access_token()
    assert excinfo.value.status_code == 401


async def test_fetch_access_token_requires_token_in_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"expires_in": 1799})

    with pytest.raises(ProviderError):
        await _provider(handler).fetch_access_token()


async def test_hotels_by_geocode_sends_filters_and_bearer() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": [{"hotelId": "HLPAR001"}]})

    hotels = await _provider(handler).hotels_by_geocode(
        "tok", latitude=48.85, longitude=2.35, radius=3, radius_unit="KM", ratings=["4", "5"], hotel_source="ALL",
    )

    assert hotels == [{"hotelId": "HLPAR001"}]
    request = seen[0]
    assert request.url.path == HOTELS_BY_GEOCODE_PATH
    assert request.headers["Authorization"] == "Bearer tok"
    assert request.url.params["ratings"] == "4,5"
    assert request.url.params["radiusUnit"] == "KM"


async def test_hotels_by_geocode_omits_empty_ratings() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"meta": {"count": 0}})

    hotels = await _provider(handler).hotels_by_geocode(
        "tok", latitude=0, longitude=0, radius=5, radius_unit="KM", ratings=[], hotel_source="ALL",
    )

    assert hotels == []
    assert "ratings" not in seen[0].url.params


async def test_repeated_failures_degrade_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    provider = _provider(handler)
    for _ in range(3):
        with pytest.raises(ProviderError):
            await provider.hotel_offers("tok", {"hotelIds": "X"})

    assert provider.status is ProviderStatus.DEGRADED


async def test_token_grant_and_searches_use_their_own_timeouts() -> None:
    timeouts = {}

    def handler(request: httpx.Request) -> httpx.Response:
        timeouts[request.url.path] = request.extensions["timeout"]["read"]
        if request.url.path == TOKEN_PATH:
            return httpx.Response(200, json={"access_token": "abc", "expires_in": 1799})
        return httpx.Response(200, json={"data": []})

    provider = _provider(handler)
    await provider.fetch_access_token()
    await provider.hotels_by_geocode("tok", 0, 0, 5, "KM", [], "ALL")

    assert timeouts == {TOKEN_PATH: 10.0, HOTELS_BY_GEOCODE_PATH: 30.0}
