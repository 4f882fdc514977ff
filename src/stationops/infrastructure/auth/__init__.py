"""Authentication infrastructure: password hashing and session tokens."""

from stationops.infrastructure.auth.jwt_service import (
    JWTService,
    SessionTokenError,
    SessionTokenExpiredError,
    jwt_service,
)
from stationops.infrastructure.auth.password_hasher import (
    hash_password,
    needs_rehash,
    verify_password,
)

__all__ = [
    "JWTService",
    "SessionTokenError",
    "SessionTokenExpiredError",
    "hash_password",
    "jwt_service",
    "needs_rehash",
    "verify_password",
]
