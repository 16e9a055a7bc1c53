from app.config import Settings


def test_amadeus_host_follows_hostname():
    assert Settings(AMADEUS_HOSTNAME="production").AMADEUS_BASE_URL == "https://api.amadeus.com"
    assert Settings(AMADEUS_HOSTNAME="test").AMADEUS_BASE_URL == "https://test.api.amadeus.com"


def test_allowed_origins_are_split_on_commas():
    settings = Settings(ALLOWED_ORIGINS="https://revam.in, http://localhost:3000,")

    assert settings.ALLOWED_ORIGINS == ["https://revam.in", "http://localhost:3000"]


def test_chat_limits_defaults():
    settings = Settings()

    assert settings.CHAT_CONFIG == {
        "unauthenticated_limit": 10,
        "phone_verified_limit": 50,
        "max_variations": 5,
        "retention_days": 30,
        "rigged_enabled": False,
    }
