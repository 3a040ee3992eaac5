"""Token issuer configuration.

An explicit, immutable configuration value handed to the issuer at
construction time. Build it once at startup, usually from settings.
"""

import uuid
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Awaitable, Callable, Union

from authcore.core.config import Settings, get_settings

PINNED_ALGORITHM = "HS256"
MIN_REFRESH_TOKEN_BYTES = 32

JtiGenerator = Callable[[], Union[str, Awaitable[str]]]


def default_jti_generator() -> str:
    """Generate a random UUID4 token id."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class IssuerConfig:
    """Signing and claim parameters shared by every issuance.

    Attributes:
        signing_key: Symmetric key material.
        issuer: Value of the ``iss`` claim.
        audience: Value of the ``aud`` claim.
        valid_for: Validity window; ``exp = iat + valid_for``.
        not_before_offset: ``nbf = iat + not_before_offset``.
        jti_generator: Sync or async callable producing a unique token id.
        algorithm: Signing algorithm name.
        refresh_token_bytes: Random bytes per refresh token, at least 32.
    """

    signing_key: str
    issuer: str
    audience: str
    valid_for: timedelta
    jti_generator: JtiGenerator | None = default_jti_generator
    not_before_offset: timedelta = field(default_factory=timedelta)
    algorithm: str = PINNED_ALGORITHM
    refresh_token_bytes: int = MIN_REFRESH_TOKEN_BYTES

    @property
    def expires_in(self) -> int:
        """Validity window in whole seconds."""
        return int(self.valid_for.total_seconds())

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        jti_generator: JtiGenerator | None = None,
    ) -> "IssuerConfig":
        """Build the configuration from application settings.

        Args:
            settings: Settings to read. Defaults to the cached settings.
            jti_generator: Token id generator. Defaults to UUID4.
        """
        settings = settings or get_settings()
        return cls(
            signing_key=settings.secret_key,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            valid_for=timedelta(minutes=settings.access_token_expire_minutes),
            not_before_offset=timedelta(seconds=settings.not_before_offset_seconds),
            jti_generator=jti_generator or default_jti_generator,
            refresh_token_bytes=settings.refresh_token_bytes,
        )
