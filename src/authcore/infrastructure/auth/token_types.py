"""Token claim models and verification outcomes.

Defines the claims carried in an access token and the tagged result the
verifier returns.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

USER_ID_CLAIM = "id"


class TokenState(str, Enum):
    """Lifecycle state of a presented token."""

    VALID = "valid"
    EXPIRED = "expired"
    REJECTED = "rejected"


class ClaimSet(BaseModel):
    """Claims recovered from a signature-verified access token."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    subject: Optional[str] = Field(None, alias="sub", description="Username")
    email: Optional[str] = Field(None, description="User's email address")
    jti: Optional[str] = Field(None, description="Unique token identifier")
    issued_at: Optional[StrictInt] = Field(None, alias="iat", description="Unix timestamp of issuance")
    user_id: Optional[Union[StrictInt, StrictStr]] = Field(
        None, alias=USER_ID_CLAIM, description="Numeric user identifier"
    )
    issuer: Optional[str] = Field(None, alias="iss")
    audience: Optional[Union[str, list[str]]] = Field(None, alias="aud")
    not_before: Optional[StrictInt] = Field(None, alias="nbf")
    expires_at: Optional[StrictInt] = Field(None, alias="exp")

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ClaimSet":
        """Build a claim set from a decoded token payload."""
        return cls.model_validate(payload)

    @property
    def is_well_formed(self) -> bool:
        """Whether subject, jti and user id are all present."""
        return bool(self.subject) and bool(self.jti) and self.user_id is not None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check the ``exp`` claim against ``now``.

        A token without ``exp`` is treated as expired.
        """
        if self.expires_at is None:
            return True
        now = now or datetime.now(timezone.utc)
        return now.timestamp() >= self.expires_at


@dataclass(frozen=True)
class VerificationResult:
    """Either verified claims or a single opaque failure.

    The reason for a failure is deliberately not carried.
    """

    claims: ClaimSet | None = None

    @property
    def ok(self) -> bool:
        return self.claims is not None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, claims: ClaimSet) -> "VerificationResult":
        return cls(claims=claims)

    @classmethod
    def failure(cls) -> "VerificationResult":
        return _FAILURE


_FAILURE = VerificationResult()
