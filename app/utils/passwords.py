"""
PASSWORD HASHING UTILITY
========================

bcrypt helpers used by the data store when a credential is created or checked.
Each hash gets its own random salt; the cost factor comes from BCRYPT_ROUNDS.

bcrypt only looks at the first 72 bytes of a password. Longer passwords are
truncated to that length before hashing and before checking, so both sides
always agree.
"""

import bcrypt

from config import BCRYPT_ROUNDS

BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plaintext password with a freshly generated salt. Returns the UTF-8 hash string."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    """True if `password` matches the stored bcrypt hash."""
    return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
