"""Authentication error taxonomy.

Configuration errors are fatal and raised while wiring the issuer at
startup. Token errors are per-call and mean "unauthenticated".
"""


class AuthError(Exception):
    """Base exception for authentication-related errors."""

    pass


class ConfigurationError(AuthError):
    """Raised when issuer configuration is unusable."""

    pass


class MissingSigningKeyError(ConfigurationError):
    """Raised when no signing key material is configured."""

    def __init__(self) -> None:
        super().__init__("Signing key must be a non-empty string")


class InvalidValidityWindowError(ConfigurationError):
    """Raised when the validity window is not strictly positive."""

    def __init__(self, seconds: float) -> None:
        super().__init__(f"Validity window must be a positive duration, got {seconds}s")


class MissingJtiGeneratorError(ConfigurationError):
    """Raised when no unique token id generator is configured."""

    def __init__(self) -> None:
        super().__init__("A callable jti generator is required")


class UnsupportedAlgorithmError(ConfigurationError):
    """Raised when configuration names an algorithm other than the pinned one."""

    def __init__(self, algorithm: str, pinned: str) -> None:
        super().__init__(f"Unsupported signing algorithm {algorithm!r}; only {pinned} is allowed")


class JtiGenerationError(AuthError):
    """Raised when the unique token id generator fails."""

    pass


class InvalidTokenError(AuthError):
    """Raised when identity is requested from a token that fails verification."""

    pass


class MalformedClaimError(InvalidTokenError):
    """Raised when a verified token lacks a usable user id claim."""

    pass


class TestOnlyComponentError(AuthError):
    """Raised when a test-only component is used outside the testing environment."""

    __test__ = False
