"""Access token verification.

Checks the signature of a presented token under a single pinned algorithm
and recovers its claims. Issuer, audience and lifetime are not checked
here: callers own those policies and need claims from expired tokens
during refresh flows.
"""

import re
from datetime import datetime
from typing import Callable

import jwt
from pydantic import ValidationError

from authcore.core.logging import get_logger
from authcore.infrastructure.auth.exceptions import InvalidTokenError, MalformedClaimError
from authcore.infrastructure.auth.issuer_config import PINNED_ALGORITHM
from authcore.infrastructure.auth.token_types import ClaimSet, TokenState, VerificationResult

logger = get_logger(__name__)

_USER_ID_PATTERN = re.compile(r"-?[0-9]+")

_DECODE_OPTIONS = {
    "verify_signature": True,
    "verify_aud": False,
    "verify_iss": False,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
}


class TokenVerifier:
    """Verifies HS256 access tokens and extracts their claims."""

    ALGORITHM = PINNED_ALGORITHM

    def verify(self, token: str, signing_key: str) -> VerificationResult:
        """Decode and validate a token.

        Any failure (malformed token, bad signature, algorithm mismatch,
        unparsable claims) collapses into ``VerificationResult.failure()``.

        Args:
            token: The encoded token.
            signing_key: Symmetric key the token should be signed with.

        Returns:
            VerificationResult holding the claims on success.
        """
        try:
            header = jwt.get_unverified_header(token)
            algorithm = header.get("alg")
            if not isinstance(algorithm, str) or algorithm.upper() != self.ALGORITHM:
                raise jwt.InvalidAlgorithmError("Algorithm not allowed")

            payload = jwt.decode(
                token,
                signing_key,
                algorithms=[self.ALGORITHM],
                options=_DECODE_OPTIONS,
            )
            claims = ClaimSet.from_payload(payload)
        except (jwt.PyJWTError, ValidationError, TypeError, ValueError) as e:
            # Reason stays in operator logs only
            logger.debug("Token validation failed", reason=type(e).__name__)
            return VerificationResult.failure()

        return VerificationResult.success(claims)

    def classify(
        self,
        token: str,
        signing_key: str,
        now: datetime | Callable[[], datetime] | None = None,
    ) -> TokenState:
        """Place a token in its lifecycle state.

        Args:
            token: The encoded token.
            signing_key: Symmetric signing key.
            now: Reference time or clock. Defaults to the current UTC time.

        Returns:
            REJECTED if verification fails, EXPIRED if ``exp`` has passed,
            otherwise VALID.
        """
        result = self.verify(token, signing_key)
        if not result.ok:
            return TokenState.REJECTED

        if callable(now):
            now = now()
        if result.claims.is_expired(now):
            return TokenState.EXPIRED
        return TokenState.VALID

    def user_id_from_token(self, token: str, signing_key: str) -> int:
        """Extract the numeric user id from a verified token.

        Lifetime is not checked.

        Raises:
            InvalidTokenError: If the token fails verification.
            MalformedClaimError: If the user id claim is missing or not an integer.
        """
        result = self.verify(token, signing_key)
        if not result.ok:
            raise InvalidTokenError("Invalid access token")

        user_id = result.claims.user_id
        if user_id is None:
            raise MalformedClaimError("Token has no user id claim")
        if isinstance(user_id, int):
            return user_id

        if not _USER_ID_PATTERN.fullmatch(user_id):
            raise MalformedClaimError("User id claim is not an integer")
        return int(user_id)


# Default token verifier instance
token_verifier = TokenVerifier()
