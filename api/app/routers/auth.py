"""
Authentication Endpoints & Bearer-Token Dependencies
"""
from fastapi import APIRouter, Depends, Request
from typing import Optional
import logging

from app.dependencies import get_auth_service
from app.schemas.auth import SignUpRequest, LoginRequest
from app.services.auth_service import AuthService
from app.utils.errors import AppError, UnauthorizedError

router = APIRouter()
logger = logging.getLogger(__name__)


def _bearer_token(request: Request) -> Optional[str]:
    header = request.headers.get("Authorization")
    if not header or not header.startswith("Bearer "):
        return None
    return header.split(" ", 1)[1].strip() or None


async def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> dict:
    """
    Dependency that resolves the Supabase user behind the bearer token
    Usage: current_user: dict = Depends(get_current_user)
    """
    token = _bearer_token(request)
    if token is None:
        raise UnauthorizedError("Unauthorized")
    user = await auth_service.verify_token(token)
    request.state.access_token = token
    return user


async def get_optional_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[dict]:
    """Like get_current_user, but anonymous or invalid tokens yield None"""
    token = _bearer_token(request)
    if token is None:
        return None
    try:
        return await auth_service.verify_token(token)
    except AppError:
        return None


@router.post("/signup")
async def sign_up(
    body: SignUpRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register with email + password. An already registered email logs in instead.
    """
    return await auth_service.sign_up(
        email=body.email,
        password=body.password,
        full_name=body.full_name or body.name,
        phone=body.phone,
    )


@router.post("/login")
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Password login; returns the Supabase session (access and refresh tokens)
    """
    return await auth_service.login(email=body.email, password=body.password)


@router.post("/logout")
async def logout(
    request: Request,
    current_user: dict = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Invalidate the caller's session
    """
    await auth_service.logout(request.state.access_token)
    logger.info(f"User logged out: {current_user.get('id')}")
    return {"message": "Logged out"}


@router.get("/me")
async def get_me(current_user: dict = Depends(get_current_user)):
    """
    Get the authenticated Supabase user
    """
    return current_user
