"""Access token entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessToken:
    """An encoded access token and its declared lifetime.

    Attributes:
        token: Compact signed token string (header.claims.signature).
        expires_in: Seconds the token remains valid from issuance.
    """

    token: str
    expires_in: int

    def __str__(self) -> str:
        return self.token
