"""Domain entities for authcore.

Entities are pure Python dataclasses that represent core credential concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from authcore.domain.entities.access_token import AccessToken
from authcore.domain.entities.password_record import PasswordRecord

__all__ = [
    "AccessToken",
    "PasswordRecord",
]
