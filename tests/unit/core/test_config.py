import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from authcore.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.environment == "development"
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_testing is False
    assert settings.jwt_issuer == "authcore"
    assert settings.access_token_expire_minutes == 15
    assert settings.refresh_token_bytes == 32
    assert settings.password_hash_iterations == 10_000
    assert settings.password_salt_bytes == 32


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "AUTHCORE_ENVIRONMENT": "production",
        "AUTHCORE_SECRET_KEY": "from-env",
        "AUTHCORE_ACCESS_TOKEN_EXPIRE_MINUTES": "30",
        "AUTHCORE_PASSWORD_HASH_ITERATIONS": "600000",
        "AUTHCORE_LOG_LEVEL": "debug",
    }):
        settings = Settings()

    assert settings.is_production is True
    assert settings.secret_key == "from-env"
    assert settings.access_token_expire_minutes == 30
    assert settings.password_hash_iterations == 600_000
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "field, value",
    [
        ("access_token_expire_minutes", 0),
        ("not_before_offset_seconds", -1),
        ("refresh_token_bytes", 16),
        ("password_salt_bytes", 8),
        ("password_hash_iterations", 1000),
    ],
)
def test_settings_reject_weak_values(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_settings_are_immutable():
    settings = Settings()

    with pytest.raises(ValidationError):
        settings.secret_key = "changed"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_testing_environment_is_active():
    assert get_settings().is_testing is True
