"""Password hashing utility using PBKDF2-HMAC-SHA256.

Derives a 256-bit key from a password and a per-record random salt.
The iteration count is stored with each record so it can be raised over
time without invalidating existing hashes.
"""

import base64
import hashlib
import hmac

from authcore.core.config import get_settings
from authcore.domain.entities.password_record import PasswordRecord
from authcore.infrastructure.auth.random_source import SecureRandomSource, random_source

KEY_LENGTH = 32
MIN_ITERATIONS = 10_000


def _b64decode(value: str) -> bytes:
    return base64.b64decode(value, validate=True)


class PasswordHasher:
    """Derives and verifies salted password hashes.

    Args:
        iterations: Iteration count for new hashes. Defaults to the
            ``password_hash_iterations`` setting.
        salt_length: Salt size in bytes for new records. Defaults to the
            ``password_salt_bytes`` setting.
        source: Random source used for salts.
    """

    def __init__(
        self,
        iterations: int | None = None,
        salt_length: int | None = None,
        source: SecureRandomSource | None = None,
    ) -> None:
        settings = get_settings()
        self.iterations = iterations if iterations is not None else settings.password_hash_iterations
        self.salt_length = salt_length if salt_length is not None else settings.password_salt_bytes
        self._source = source or random_source

        if self.iterations < MIN_ITERATIONS:
            raise ValueError(f"iterations must be at least {MIN_ITERATIONS}")
        if self.salt_length < 16:
            raise ValueError("salt_length must be at least 16 bytes")

    def generate_salt(self) -> bytes:
        """Return fresh random salt bytes."""
        return self._source.get_bytes(self.salt_length)

    def hash(self, password: str, salt: bytes, iterations: int | None = None) -> str:
        """Derive the base64-encoded key for ``password`` and ``salt``.

        Deterministic for identical password, salt and iteration count.

        Args:
            password: The plaintext password.
            salt: Raw salt bytes.
            iterations: Override the configured iteration count.

        Returns:
            Base64 string of the 32-byte derived key.
        """
        derived = hashlib.pbkdf2_hmac(
            "sha256",
            password.encode("utf-8"),
            salt,
            iterations if iterations is not None else self.iterations,
            dklen=KEY_LENGTH,
        )
        return base64.b64encode(derived).decode("ascii")

    def verify(self, password: str, hashed: str, salt: str, iterations: int | None = None) -> bool:
        """Check a password against a stored hash.

        Uses constant-time comparison to prevent timing attacks.

        Args:
            password: The plaintext password to verify.
            hashed: Stored base64 hash.
            salt: Stored base64 salt.
            iterations: Iteration count the hash was derived with.

        Returns:
            True if the password matches, False otherwise.

        Raises:
            binascii.Error: If the stored salt is not valid base64.
        """
        candidate = self.hash(password, _b64decode(salt), iterations)
        return hmac.compare_digest(candidate.encode("utf-8"), hashed.encode("utf-8"))

    def create_record(self, password: str) -> PasswordRecord:
        """Hash a password with a freshly generated salt."""
        salt = self.generate_salt()
        return PasswordRecord(
            hash=self.hash(password, salt),
            salt=base64.b64encode(salt).decode("ascii"),
            iterations=self.iterations,
        )

    def verify_record(self, password: str, record: PasswordRecord) -> bool:
        """Verify a password using the record's own derivation parameters."""
        return self.verify(password, record.hash, record.salt, record.iterations)

    def needs_rehash(self, record: PasswordRecord) -> bool:
        """Check if a record was derived with fewer iterations than current.

        This should be called after successful password verification.
        If True, the password should be rehashed with :meth:`create_record`.
        """
        return record.iterations < self.iterations


# Default password hasher instance
password_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt into an encoded record string.

    Example:
        >>> hash_password("SecureP@ss123!").startswith("pbkdf2_sha256$")
        True
    """
    return password_hasher.create_record(password).to_string()


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against an encoded record string.

    Returns False for a wrong password. Raises ValueError if ``hashed``
    is not an encoded record.
    """
    return password_hasher.verify_record(password, PasswordRecord.from_string(hashed))


def needs_rehash(hashed: str) -> bool:
    """Check if an encoded record should be rehashed with current parameters."""
    return password_hasher.needs_rehash(PasswordRecord.from_string(hashed))
