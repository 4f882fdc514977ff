"""Secret token generation for invitation links."""

import secrets

INVITATION_TOKEN_BYTES = 32


class TokenService:
    """Mints unguessable tokens."""

    @staticmethod
    def generate_token(length: int = INVITATION_TOKEN_BYTES) -> str:
        """Return ``length`` random bytes as lower-case hex (64 chars by default)."""
        return secrets.token_hex(length)

    @staticmethod
    def preview(token: str) -> str:
        """Shortened form of a token that is safe to log."""
        return f"{token[:8]}..."


token_service = TokenService()
