"""
Phone Verification Endpoints
"""
from fastapi import APIRouter, Depends

from app.dependencies import get_phone_verification_service
from app.schemas.auth import PhoneVerificationRequest
from app.services.phone_verification import PhoneVerificationService

router = APIRouter()


@router.post("/verify")
async def verify_phone_token(
    body: PhoneVerificationRequest,
    service: PhoneVerificationService = Depends(get_phone_verification_service),
):
    """
    Validate a phone-verification token and return the verified phone number with its claims
    """
    return service.verify_phone_token(body.token)
