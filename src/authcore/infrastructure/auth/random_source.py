"""Cryptographically secure random bytes.

All salts and refresh tokens are drawn from here. The source is the
operating system CSPRNG via :mod:`secrets`; there is no seeding.
"""

import secrets

DEFAULT_LENGTH = 32


class SecureRandomSource:
    """Supplies unpredictable random byte sequences."""

    def get_bytes(self, length: int = DEFAULT_LENGTH) -> bytes:
        """Return ``length`` cryptographically random bytes.

        Args:
            length: Number of bytes. Must be positive.

        Returns:
            Random bytes from the OS entropy source.

        Raises:
            ValueError: If length is not a positive integer.
        """
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise ValueError(f"length must be a positive integer, got {length!r}")
        return secrets.token_bytes(length)


# Default random source instance
random_source = SecureRandomSource()
