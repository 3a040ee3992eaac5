"""Password record entity.

Stores the derived key for a password together with everything needed to
derive it again: the salt and the iteration count used at hashing time.
"""

from dataclasses import dataclass

SCHEME = "pbkdf2_sha256"


@dataclass(frozen=True)
class PasswordRecord:
    """Stored password credential.

    Attributes:
        hash: Base64-encoded 32-byte derived key.
        salt: Base64-encoded salt, unique per record.
        iterations: PBKDF2 iteration count the hash was derived with.
    """

    hash: str
    salt: str
    iterations: int

    def to_string(self) -> str:
        """Serialize as ``pbkdf2_sha256$<iterations>$<salt>$<hash>``."""
        return f"{SCHEME}${self.iterations}${self.salt}${self.hash}"

    @classmethod
    def from_string(cls, encoded: str) -> "PasswordRecord":
        """Parse a record produced by :meth:`to_string`.

        Raises:
            ValueError: If the string is not a well-formed record.
        """
        parts = encoded.split("$")
        if len(parts) != 4 or parts[0] != SCHEME:
            raise ValueError("Invalid password record format")

        _, iterations, salt, hashed = parts
        if not iterations.isdigit() or int(iterations) <= 0:
            raise ValueError("Invalid iteration count in password record")
        if not salt or not hashed:
            raise ValueError("Password record is missing salt or hash")

        return cls(hash=hashed, salt=salt, iterations=int(iterations))
