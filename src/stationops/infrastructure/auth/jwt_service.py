"""Session tokens.

A successful login or invitation acceptance yields a signed HS256 access
token carrying the user id, email and role.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from stationops.core.config import get_settings


class SessionTokenError(Exception):
    """Raised when a session token cannot be trusted."""


class SessionTokenExpiredError(SessionTokenError):
    """Raised when a session token is past its expiry."""


class JWTService:
    """Creates and validates access tokens."""

    ALGORITHM = "HS256"
    ISSUER = "stationops"

    def __init__(self, secret_key: str | None = None) -> None:
        self._secret_key = secret_key

    @property
    def secret_key(self) -> str:
        return self._secret_key or get_settings().secret_key

    @staticmethod
    def default_lifetime() -> timedelta:
        return timedelta(minutes=get_settings().access_token_expire_minutes)

    def create_access_token(
        self,
        user_id: str,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token.

        Args:
            user_id: Subject of the token.
            email: Email of the user.
            role: Role name, used for capability checks.
            expires_delta: Lifetime. Defaults to the configured value.

        Returns:
            Encoded JWT.
        """
        now = datetime.now(timezone.utc)
        payload = {
            "iss": self.ISSUER,
            "sub": user_id,
            "iat": now,
            "exp": now + (expires_delta or self.default_lifetime()),
            "user_id": user_id,
            "email": email,
            "role": role,
            "type": "access",
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.ALGORITHM)

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Decode an access token and check its type.

        Raises:
            SessionTokenExpiredError: If the token has expired.
            SessionTokenError: If the signature, issuer or type is wrong.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self.ISSUER,
            )
        except jwt.ExpiredSignatureError as e:
            raise SessionTokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise SessionTokenError("Invalid token") from e

        if payload.get("type") != "access":
            raise SessionTokenError("Not an access token")
        return payload

    def get_expires_in(self) -> int:
        """Lifetime of newly issued tokens, in seconds."""
        return int(self.default_lifetime().total_seconds())


jwt_service = JWTService()
