import httpx

from tasks import integration_tokens


def test_refresh_task_reports_api_result(monkeypatch):
    calls = []

    def fake_post(url, headers=None, timeout=None):
        calls.append(url)
        return httpx.Response(
            200,
            json={"provider": "amadeus", "expires_at": "2025-06-01T12:29:00+00:00"},
            request=httpx.Request("POST", url),
        )

    monkeypatch.setattr(integration_tokens.httpx, "post", fake_post)

    result = integration_tokens.refresh_amadeus_token()

    assert result["status"] == "refreshed"
    assert result["expires_at"] == "2025-06-01T12:29:00+00:00"
    assert calls[0].endswith("/api/internal/integrations/amadeus/token/refresh")


def test_refresh_task_swallows_failures(monkeypatch):
    def fake_post(url, headers=None, timeout=None):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(integration_tokens.httpx, "post", fake_post)

    result = integration_tokens.refresh_amadeus_token()

    assert result["status"] == "failed"
    assert "connection refused" in result["error"]


def test_refresh_task_swallows_http_errors(monkeypatch):
    def fake_post(url, headers=None, timeout=None):
        return httpx.Response(502, json={"message": "upstream"}, request=httpx.Request("POST", url))

    monkeypatch.setattr(integration_tokens.httpx, "post", fake_post)

    assert integration_tokens.refresh_amadeus_token()["status"] == "failed"
