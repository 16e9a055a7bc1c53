"""
Phone Verification Service - validates externally issued phone-verification JWTs
"""
from typing import Any, Dict, Optional
import logging

import jwt

from app.utils.errors import BadRequestError, UnauthorizedError

logger = logging.getLogger(__name__)

ALGORITHMS = ["HS256", "HS384", "HS512"]

# Issuers disagree on the claim name; first non-empty wins
PHONE_CLAIMS = ("phone_no", "phone", "phone_number", "phoneNumber", "mobile", "mobile_number", "msisdn")


class PhoneVerificationService:

    def __init__(self, api_key: Optional[str], issuer: Optional[str] = None, audience: Optional[str] = None):
        self.api_key = api_key
        self.issuer = issuer
        self.audience = audience

    def verify_phone_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and claims, then pull out the phone number.

        Expiry gets its own message; every other validation failure is
        reported as a generic invalid token.
        """
        if not token or not isinstance(token, str):
            raise BadRequestError("verification token is required")

        if not self.api_key:
            raise UnauthorizedError("Phone verification API key is missing")

        options = {"verify_aud": bool(self.audience)}
        try:
            payload = jwt.decode(
                token,
                self.api_key,
                algorithms=ALGORITHMS,
                issuer=self.issuer or None,
                audience=self.audience or None,
                options=options,
            )
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError("Verification token has expired")
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected phone verification token: {e}")
            raise UnauthorizedError("Invalid verification token")

        phone = next((str(payload[c]) for c in PHONE_CLAIMS if payload.get(c)), None)
        if not phone:
            raise BadRequestError("Verification token does not carry a phone number")

        return {"phone": phone, "payload": payload}
