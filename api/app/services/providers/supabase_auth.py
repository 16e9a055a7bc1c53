"""
Supabase Auth Provider - GoTrue REST endpoints for credentials and sessions
https://supabase.com/docs/guides/auth
"""
from typing import Any, Dict, Optional
import logging

import httpx

from app.config import settings
from .base import ExternalProvider, ProviderError

logger = logging.getLogger(__name__)


class SupabaseAuthError(ProviderError):
    """GoTrue rejected the request; message is the provider's own text"""
    def __init__(self, message: str, status_code: Optional[int] = None, original_error: Optional[Exception] = None):
        super().__init__("supabase-auth", message, original_error, status_code=status_code)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for key in ("msg", "message", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"


class SupabaseAuthProvider(ExternalProvider):
    """
    Thin client over the hosted auth service. Password hashing, session
    issuance and token validation all happen on the Supabase side.
    """

    name = "supabase-auth"
    timeout = 10.0

    def __init__(
        self,
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(transport)
        self.auth_url = f"{(url or settings.SUPABASE_URL).rstrip('/')}/auth/v1"
        self.api_key = api_key if api_key is not None else settings.SUPABASE_SERVICE_ROLE_KEY

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {access_token or self.api_key}",
        }

    async def _request(
        self,
        method: str,
        path: str,
        access_token: Optional[str] = None,
        **kwargs,
    ) -> Optional[Dict[str, Any]]:
        try:
            async with self.client(timeout=self.timeout) as client:
                response = await client.request(
                    method,
                    f"{self.auth_url}{path}",
                    headers=self._headers(access_token),
                    **kwargs,
                )
        except httpx.HTTPError as e:
            self.record_failure(e)
            raise SupabaseAuthError(f"Auth service unreachable: {e}", original_error=e)

        if response.status_code >= 400:
            raise SupabaseAuthError(_error_message(response), status_code=response.status_code)

        self.record_success()
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise SupabaseAuthError("Auth service returned a non-JSON body", response.status_code, e)

    async def sign_up(self, email: str, password: str, user_metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Create credentials; returns a session when auto-confirm is on, otherwise the user"""
        body = {"email": email, "password": password, "data": user_metadata or {}}
        return await self._request("POST", "/signup", json=body) or {}

    async def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        return await self._request(
            "POST", "/token", params={"grant_type": "password"},
            json={"email": email, "password": password},
        ) or {}

    async def get_user(self, access_token: str) -> Dict[str, Any]:
        return await self._request("GET", "/user", access_token=access_token) or {}

    async def sign_out(self, access_token: str) -> None:
        await self._request("POST", "/logout", access_token=access_token)
