"""Authentication infrastructure components.

This module provides password hashing, access token issuance and
verification, and the secure random source they draw from.
"""

from authcore.infrastructure.auth.exceptions import (
    AuthError,
    ConfigurationError,
    InvalidTokenError,
    InvalidValidityWindowError,
    JtiGenerationError,
    MalformedClaimError,
    MissingJtiGeneratorError,
    MissingSigningKeyError,
    UnsupportedAlgorithmError,
)
from authcore.infrastructure.auth.issuer_config import IssuerConfig
from authcore.infrastructure.auth.password_hasher import (
    PasswordHasher,
    hash_password,
    needs_rehash,
    password_hasher,
    verify_password,
)
from authcore.infrastructure.auth.random_source import SecureRandomSource, random_source
from authcore.infrastructure.auth.token_issuer import TokenIssuer
from authcore.infrastructure.auth.token_types import ClaimSet, TokenState, VerificationResult
from authcore.infrastructure.auth.token_verifier import TokenVerifier, token_verifier

__all__ = [
    "AuthError",
    "ClaimSet",
    "ConfigurationError",
    "InvalidTokenError",
    "InvalidValidityWindowError",
    "IssuerConfig",
    "JtiGenerationError",
    "MalformedClaimError",
    "MissingJtiGeneratorError",
    "MissingSigningKeyError",
    "PasswordHasher",
    "SecureRandomSource",
    "TokenIssuer",
    "TokenState",
    "TokenVerifier",
    "UnsupportedAlgorithmError",
    "VerificationResult",
    "hash_password",
    "needs_rehash",
    "password_hasher",
    "random_source",
    "token_verifier",
    "verify_password",
]
