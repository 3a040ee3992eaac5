"""Access and refresh token issuance.

Access tokens are HS256-signed JWTs carrying the user's identity claims.
Refresh tokens are opaque random strings with no embedded claims; their
storage and rotation belong to the session layer.
"""

import base64
import inspect
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import jwt

from authcore.core.logging import get_logger
from authcore.domain.entities.access_token import AccessToken
from authcore.infrastructure.auth.exceptions import (
    ConfigurationError,
    InvalidValidityWindowError,
    JtiGenerationError,
    MissingJtiGeneratorError,
    MissingSigningKeyError,
    UnsupportedAlgorithmError,
)
from authcore.infrastructure.auth.issuer_config import (
    MIN_REFRESH_TOKEN_BYTES,
    PINNED_ALGORITHM,
    IssuerConfig,
)
from authcore.infrastructure.auth.random_source import SecureRandomSource, random_source
from authcore.infrastructure.auth.token_types import USER_ID_CLAIM

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_unix_epoch(moment: datetime) -> int:
    """Convert a datetime to whole seconds since the Unix epoch.

    Rounds half up rather than truncating.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return math.floor(moment.timestamp() + 0.5)


def _raise_if_invalid(config: IssuerConfig) -> None:
    if config is None:
        raise TypeError("config is required")
    if config.valid_for <= timedelta(0):
        raise InvalidValidityWindowError(config.valid_for.total_seconds())
    if not isinstance(config.signing_key, str) or not config.signing_key:
        raise MissingSigningKeyError()
    if config.jti_generator is None or not callable(config.jti_generator):
        raise MissingJtiGeneratorError()
    if config.algorithm != PINNED_ALGORITHM:
        raise UnsupportedAlgorithmError(config.algorithm, PINNED_ALGORITHM)
    if config.refresh_token_bytes < MIN_REFRESH_TOKEN_BYTES:
        raise ConfigurationError(
            f"refresh_token_bytes must be at least {MIN_REFRESH_TOKEN_BYTES}"
        )


class TokenIssuer:
    """Issues signed access tokens and opaque refresh tokens.

    The configuration is validated once here; steady-state issuance cannot
    fail on configuration grounds.
    """

    def __init__(
        self,
        config: IssuerConfig,
        source: SecureRandomSource | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the issuer.

        Args:
            config: Issuer configuration.
            source: Random source for refresh tokens.
            clock: Callable returning the current UTC time.

        Raises:
            ConfigurationError: If the configuration is unusable.
        """
        _raise_if_invalid(config)

        self._config = config
        self._source = source or random_source
        self._clock = clock or utc_now

        logger.info(
            "Token issuer configured",
            issuer=config.issuer,
            audience=config.audience,
            expires_in=config.expires_in,
        )

    @property
    def config(self) -> IssuerConfig:
        return self._config

    async def _generate_jti(self) -> str:
        try:
            jti = self._config.jti_generator()
            if inspect.isawaitable(jti):
                jti = await jti
        except Exception as e:
            raise JtiGenerationError("Token id generator failed") from e

        if not isinstance(jti, str) or not jti:
            raise JtiGenerationError("Token id generator returned an empty or non-string id")
        return jti

    def build_claims(self, user_id: int, user_name: str, email: str, jti: str) -> dict[str, Any]:
        """Build the full signed payload for one issuance.

        Args:
            user_id: The user's numeric identifier.
            user_name: Username, placed in ``sub``.
            email: The user's email address.
            jti: Unique token id.

        Returns:
            Payload dict ready for signing.
        """
        now = self._clock()
        issued_at = to_unix_epoch(now)
        config = self._config

        return {
            "sub": user_name,
            "email": email,
            "jti": jti,
            "iat": issued_at,
            USER_ID_CLAIM: user_id,
            "iss": config.issuer,
            "aud": config.audience,
            "nbf": to_unix_epoch(now + config.not_before_offset),
            "exp": to_unix_epoch(now + config.valid_for),
        }

    async def issue_access_token(self, user_id: int, user_name: str, email: str) -> AccessToken:
        """Create a signed access token.

        The token id generator is awaited first; if it fails nothing is
        signed.

        Args:
            user_id: The user's numeric identifier.
            user_name: Username, placed in ``sub``.
            email: The user's email address.

        Returns:
            AccessToken with the encoded JWT and its lifetime in seconds.

        Raises:
            JtiGenerationError: If the token id generator fails.
        """
        jti = await self._generate_jti()
        payload = self.build_claims(user_id, user_name, email, jti)
        token = jwt.encode(payload, self._config.signing_key, algorithm=self._config.algorithm)

        logger.debug("Access token issued", user_id=user_id, jti=jti)
        return AccessToken(token=token, expires_in=self._config.expires_in)

    def issue_refresh_token(self) -> str:
        """Create an opaque refresh token.

        Returns:
            Standard base64 of secure random bytes.
        """
        return base64.b64encode(self._source.get_bytes(self._config.refresh_token_bytes)).decode("ascii")
