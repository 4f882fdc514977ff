"""Argon2id password hashing.

Account passwords are only ever stored as Argon2id hashes produced here.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_hasher = PasswordHasher()

# Verified against when an email is unknown so that login timing does not
# reveal whether an account exists.
_DUMMY_HASH = _hasher.hash("stationops-dummy-password")


def hash_password(password: str) -> str:
    """Hash a plaintext password.

    Example:
        >>> hash_password("Welcome2024").startswith("$argon2id$")
        True
    """
    return _hasher.hash(password)


def verify_password(password: str, hashed: str | None) -> bool:
    """Check a plaintext password against a stored hash.

    Args:
        password: Candidate password.
        hashed: Stored hash. None is treated as "no account" and always fails
            after spending the same work as a real check.

    Returns:
        True if the password matches.
    """
    try:
        _hasher.verify(hashed or _DUMMY_HASH, password)
    except (VerificationError, InvalidHashError):
        return False
    return hashed is not None


def needs_rehash(hashed: str) -> bool:
    """Whether a stored hash was made with outdated parameters."""
    return _hasher.check_needs_rehash(hashed)
