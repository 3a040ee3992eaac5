"""Infrastructure layer - cryptographic implementations.

This layer contains everything that touches PyJWT, hashlib or the
operating system's entropy source.
"""
