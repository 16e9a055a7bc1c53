import httpx
import pytest

from app import dependencies
from app.config import Settings
from app.main import app
from app.routers import health
from app.services.destination_service import DestinationService
from app.services.hotel_service import HotelSearchResult
from app.services.phone_verification import PhoneVerificationService
from app.services.providers.base import ProviderError
from app.utils.database import get_db
from app.utils.errors import NotFoundError, UnauthorizedError

pytestmark = pytest.mark.anyio("asyncio")

USER = {"id": "4b1c9a8e-2d3f-4e5a-9b6c-7d8e9f0a1b2c", "email": "traveler@example.com"}
DESTINATION_ID = "2f7c3a34-5b8e-4a61-9d0e-7b2f61c8e0a1"
DESTINATION_ROW = {
    "id": DESTINATION_ID,
    "name": "Manali",
    "slug": "manali",
    "center_lat": 32.24,
    "center_lng": 77.19,
    "area_geojson": None,
    "center_geojson": '{"type":"Point","coordinates":[77.19,32.24]}',
    "metadata": {"region": "Himachal"},
}


class StubAuthService:
    async def verify_token(self, token):
        if token != "good-token":
            raise UnauthorizedError("Invalid token")
        return USER


class StubDestinationStore:
    def __init__(self) -> None:
        self.updates = []

    async def list_all(self):
        return [DESTINATION_ROW]

    async def get(self, destination_id):
        return DESTINATION_ROW if destination_id == DESTINATION_ID else None

    async def update(self, destination_id, values):
        self.updates.append(values)
        return {**DESTINATION_ROW, **values}


class StubHotelService:
    def __init__(self) -> None:
        self.calls = []

    async def search_by_geocode(self, **kwargs):
        self.calls.append(kwargs)
        return HotelSearchResult(provider_name="amadeus", success=False, error_message="amadeus: HTTP 500")

    async def get_hotel_offers(self, **kwargs):
        self.calls.append(kwargs)
        return HotelSearchResult(provider_name="amadeus", items=[{"hotel": {"hotelId": "HLPAR266"}}])


class StubWishlistService:
    async def remove(self, user_id, poi_id):
        raise NotFoundError("POI not found in wishlist.")


class StubTokenService:
    provider_name = "amadeus"

    def __init__(self, error: Exception = None) -> None:
        self.error = error
        self.cached = None
        self.refreshes = 0

    async def refresh_now(self):
        self.refreshes += 1
        if self.error:
            raise self.error
        return "fresh"


class FakeSession:
    def __init__(self) -> None:
        self.queries = 0

    async def execute(self, statement):
        self.queries += 1


@pytest.fixture()
def overrides():
    store = StubDestinationStore()
    hotels = StubHotelService()
    tokens = StubTokenService()
    session = FakeSession()

    async def fake_db():
        yield session

    app.dependency_overrides.clear()
    app.dependency_overrides.update(
        {
            dependencies.get_auth_service: lambda: StubAuthService(),
            dependencies.get_destination_service: lambda: DestinationService(store),
            dependencies.get_hotel_service: lambda: hotels,
            dependencies.get_wishlist_service: lambda: StubWishlistService(),
            dependencies.get_amadeus_token_service: lambda: tokens,
            dependencies.get_phone_verification_service: lambda: PhoneVerificationService(None),
            get_db: fake_db,
        }
    )

    yield {"store": store, "hotels": hotels, "tokens": tokens, "session": session}

    app.dependency_overrides.clear()


@pytest.fixture()
async def client(overrides):
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client


AUTH = {"Authorization": "Bearer good-token"}


async def test_health_and_trial(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

    response = await client.get("/api/trial")
    assert response.status_code == 200
    assert response.text == "everything okay"


async def test_readiness_probe_is_throttled(client, overrides, monkeypatch):
    monkeypatch.setattr(health, "_db_status", None)
    monkeypatch.setattr(health, "_db_check_at", 0.0)

    first = await client.get("/health/ready")
    second = await client.get("/health/ready")

    assert first.json()["status"] == "ready"
    assert second.json()["checks"]["database"] == {"status": "pass"}
    assert overrides["session"].queries == 1


async def test_destinations_require_bearer_token(client):
    response = await client.get("/api/destinations")

    assert response.status_code == 401
    body = response.json()
    assert body["status"] == 401
    assert body["message"] == "Unauthorized"
    assert isinstance(body["timestamp"], int)


async def test_destinations_reject_invalid_token(client):
    response = await client.get("/api/destinations", headers={"Authorization": "Bearer expired"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_me_returns_current_user(client):
    response = await client.get("/api/auth/me", headers=AUTH)

    assert response.status_code == 200
    assert response.json() == USER


async def test_list_destinations(client):
    response = await client.get("/api/destinations", headers=AUTH)

    assert response.status_code == 200
    [destination] = response.json()
    assert destination["center"] == {"type": "Point", "coordinates": [77.19, 32.24]}
    assert destination["metadata"] == {"region": "Himachal"}


async def test_get_missing_destination_is_not_found(client):
    response = await client.get("/api/destinations/7e57ab1e-0000-4000-8000-000000000000", headers=AUTH)

    assert response.status_code == 404
    assert response.json()["message"] == "Destination with ID 7e57ab1e-0000-4000-8000-000000000000 not found."


async def test_patch_destination_unwraps_payload(client, overrides):
    response = await client.patch(
        f"/api/destinations/{DESTINATION_ID}",
        headers=AUTH,
        json={"payload": {"base_price": 2400}},
    )

    assert response.status_code == 200
    assert response.json()["base_price"] == 2400
    assert overrides["store"].updates == [{"base_price": 2400}]


async def test_remove_missing_wishlist_entry(client):
    response = await client.delete(
        "/api/poi-wishlist/4b1c9a8e-2d3f-4e5a-9b6c-7d8e9f0a1b2c/9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d",
        headers=AUTH,
    )

    assert response.status_code == 404
    assert response.json()["message"] == "POI not found in wishlist."


async def test_wishlist_rejects_malformed_ids(client):
    response = await client.get("/api/poi-wishlist/not-a-uuid", headers=AUTH)

    assert response.status_code == 422


async def test_hotel_search_failure_is_empty_not_error(client, overrides):
    response = await client.get(
        "/api/hotels/by-geocode",
        params=[("latitude", "48.85"), ("longitude", "2.35"), ("ratings", "4"), ("ratings", "5")],
    )

    assert response.status_code == 200
    assert response.json() == {"hotels": [], "count": 0, "success": False, "error": "amadeus: HTTP 500"}
    assert overrides["hotels"].calls[0]["ratings"] == ["4", "5"]


async def test_hotel_offers_validates_dates(client, overrides):
    response = await client.get(
        "/api/hotels/offers",
        params={"hotel_ids": "HLPAR266", "check_in_date": "2025-07-04", "check_out_date": "2025-07-01"},
    )

    assert response.status_code == 400
    assert overrides["hotels"].calls == []


async def test_hotel_offers_splits_ids(client, overrides):
    response = await client.get(
        "/api/hotels/offers",
        params={"hotel_ids": "HLPAR266, HLPAR001,", "check_in_date": "2025-07-01", "check_out_date": "2025-07-04"},
    )

    assert response.status_code == 200
    assert response.json()["count"] == 1
    assert overrides["hotels"].calls[0]["hotel_ids"] == ["HLPAR266", "HLPAR001"]


async def test_phone_verification_without_key(client):
    response = await client.post("/api/phone-verification/verify", json={"token": "abc"})

    assert response.status_code == 401
    assert response.json()["message"] == "Phone verification API key is missing"


async def test_internal_refresh_requires_shared_token(client, overrides):
    app.dependency_overrides[dependencies.get_app_settings] = lambda: Settings(INTERNAL_TASK_TOKEN="task-secret")

    denied = await client.post("/api/internal/integrations/amadeus/token/refresh")
    allowed = await client.post(
        "/api/internal/integrations/amadeus/token/refresh",
        headers={"X-Internal-Token": "task-secret"},
    )

    assert denied.status_code == 401
    assert allowed.status_code == 200
    assert allowed.json()["provider"] == "amadeus"
    assert overrides["tokens"].refreshes == 1


async def test_internal_refresh_upstream_failure(client, overrides):
    overrides["tokens"].error = ProviderError("amadeus", "HTTP 401: invalid_client")

    response = await client.post("/api/internal/integrations/amadeus/token/refresh")

    assert response.status_code == 502
    assert response.json()["message"] == "HTTP 401: invalid_client"
