"""authcore - token issuance, verification and password hashing.

The narrow credential primitive beneath a login flow: signed, time-bounded
access tokens, opaque refresh tokens and salted PBKDF2 password hashes.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
