"""
Auth Service - credential handling delegated to Supabase Auth
"""
from typing import Any, Dict, Optional
import logging

from app.services.providers.supabase_auth import SupabaseAuthError, SupabaseAuthProvider
from app.stores.users import UserStore
from app.utils.errors import BadRequestError, StoreError, UnauthorizedError

logger = logging.getLogger(__name__)

ALREADY_REGISTERED_MARKERS = ("already registered", "already exists")


def _is_already_registered(error: SupabaseAuthError) -> bool:
    message = error.message.lower()
    return any(marker in message for marker in ALREADY_REGISTERED_MARKERS)


class AuthService:
    """
    Sign-up against an email that is already registered falls through to a
    password login with the same credentials instead of failing.
    """

    def __init__(self, provider: SupabaseAuthProvider, users: UserStore):
        self._provider = provider
        self._users = users

    async def sign_up(
        self,
        email: str,
        password: str,
        full_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Dict[str, Any]:
        full_name = (full_name or "").strip()
        phone = (phone or "").strip()
        logger.info(f"Attempting signup for: {email}")

        metadata = {}
        if full_name:
            metadata["full_name"] = full_name
        if phone:
            metadata["phone"] = phone

        try:
            data = await self._provider.sign_up(email, password, metadata)
        except SupabaseAuthError as e:
            if _is_already_registered(e):
                logger.info(f"User {email} already registered, attempting login instead")
                return await self.login(email, password)
            logger.warning(f"Supabase signup error for {email}: {e.message}")
            raise BadRequestError(e.message)

        user = data.get("user") or data
        user_id = user.get("id")
        if user_id:
            try:
                await self._users.upsert_profile(
                    user_id=user_id,
                    email=email,
                    full_name=full_name or "User",
                    phone=phone or None,
                )
            except StoreError as e:
                raise BadRequestError(e.message)
            logger.info(f"Signup completed, user ID: {user_id}")

        return data

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """Password grant; the returned session carries the access token"""
        logger.info(f"Attempting login for: {email}")
        try:
            return await self._provider.sign_in_with_password(email, password)
        except SupabaseAuthError as e:
            raise UnauthorizedError(e.message)

    async def verify_token(self, token: Optional[str]) -> Dict[str, Any]:
        if not token:
            raise UnauthorizedError("Invalid token")
        try:
            user = await self._provider.get_user(token)
        except SupabaseAuthError:
            raise UnauthorizedError("Invalid token")
        if not user or not user.get("id"):
            raise UnauthorizedError("Invalid token")
        return user

    async def logout(self, token: str) -> None:
        try:
            await self._provider.sign_out(token)
        except SupabaseAuthError as e:
            raise BadRequestError(e.message)
