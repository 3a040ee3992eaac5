"""Pytest configuration for all tests."""

import os
from datetime import datetime, timedelta, timezone

import pytest

os.environ["AUTHCORE_ENVIRONMENT"] = "testing"

from authcore.core.config import get_settings  # noqa: E402
from authcore.infrastructure.auth.issuer_config import IssuerConfig  # noqa: E402
from authcore.infrastructure.auth.token_issuer import TokenIssuer  # noqa: E402
from authcore.infrastructure.auth.token_verifier import TokenVerifier  # noqa: E402

SIGNING_KEY = "test-signing-key-at-least-256-bits-long-for-hs256"

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _testing_settings():
    """Run every test against freshly loaded testing settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def signing_key() -> str:
    return SIGNING_KEY


@pytest.fixture
def issuer_config() -> IssuerConfig:
    return IssuerConfig(
        signing_key=SIGNING_KEY,
        issuer="authcore-tests",
        audience="authcore-clients",
        valid_for=timedelta(minutes=15),
        jti_generator=lambda: "jti-0001",
    )


@pytest.fixture
def issuer(issuer_config: IssuerConfig) -> TokenIssuer:
    return TokenIssuer(issuer_config)


@pytest.fixture
def fixed_clock_issuer(issuer_config: IssuerConfig) -> TokenIssuer:
    return TokenIssuer(issuer_config, clock=lambda: FIXED_NOW)


@pytest.fixture
def verifier() -> TokenVerifier:
    return TokenVerifier()
