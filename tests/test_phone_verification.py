from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.services.phone_verification import PhoneVerificationService
from app.utils.errors import BadRequestError, UnauthorizedError

API_KEY = "phone-verification-signing-key-for-tests-0123456789abcdef0123456789abcdef"


def _token(claims: dict, key: str = API_KEY, algorithm: str = "HS256") -> str:
    payload = {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)}
    payload.update(claims)
    return jwt.encode(payload, key, algorithm=algorithm)


def test_valid_token_returns_phone_and_payload() -> None:
    service = PhoneVerificationService(API_KEY)

    result = service.verify_phone_token(_token({"phone_no": "+919812345678", "sub": "abc"}))

    assert result["phone"] == "+919812345678"
    assert result["payload"]["sub"] == "abc"


@pytest.mark.parametrize("claim", ["phone", "phone_number", "phoneNumber", "mobile", "mobile_number", "msisdn"])
def test_alternate_phone_claims_are_recognised(claim) -> None:
    service = PhoneVerificationService(API_KEY)

    result = service.verify_phone_token(_token({claim: "919812345678"}, algorithm="HS512"))

    assert result["phone"] == "919812345678"


def test_phone_no_claim_takes_precedence() -> None:
    service = PhoneVerificationService(API_KEY)

    result = service.verify_phone_token(_token({"msisdn": "111", "phone_no": "222"}))

    assert result["phone"] == "222"


def test_expired_token_has_dedicated_message() -> None:
    service = PhoneVerificationService(API_KEY)
    token = _token({"phone": "1", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)})

    with pytest.raises(UnauthorizedError) as excinfo:
        service.verify_phone_token(token)
    assert excinfo.value.message == "Verification token has expired"


def test_tampered_token_is_invalid() -> None:
    service = PhoneVerificationService(API_KEY)
    token = _token({"phone": "1"}, key="some-other-signing-key-for-tests-9876543210fedcba9876543210fedcba")

    with pytest.raises(UnauthorizedError) as excinfo:
        service.verify_phone_token(token)
    assert excinfo.value.message == "Invalid verification token"


def test_missing_api_key_rejects_before_decoding() -> None:
    service = PhoneVerificationService(None)

    with pytest.raises(UnauthorizedError) as excinfo:
        service.verify_phone_token("not-even-a-jwt")
    assert excinfo.value.message == "Phone verification API key is missing"


def test_empty_token_is_bad_request() -> None:
    with pytest.raises(BadRequestError):
        PhoneVerificationService(API_KEY).verify_phone_token("")


def test_issuer_mismatch_is_invalid() -> None:
    service = PhoneVerificationService(API_KEY, issuer="https://verify.example.com")
    token = _token({"phone": "1", "iss": "https://elsewhere.example.com"})

    with pytest.raises(UnauthorizedError) as excinfo:
        service.verify_phone_token(token)
    assert excinfo.value.message == "Invalid verification token"


def test_audience_checked_only_when_configured() -> None:
    token = _token({"phone": "1", "aud": "revam-bnb"})

    assert PhoneVerificationService(API_KEY).verify_phone_token(token)["phone"] == "1"
    assert PhoneVerificationService(API_KEY, audience="revam-bnb").verify_phone_token(token)["phone"] == "1"
    with pytest.raises(UnauthorizedError):
        PhoneVerificationService(API_KEY, audience="another-app").verify_phone_token(token)


def test_token_without_phone_claim_is_bad_request() -> None:
    service = PhoneVerificationService(API_KEY)

    with pytest.raises(BadRequestError):
        service.verify_phone_token(_token({"sub": "abc"}))
