"""FastAPI dependencies for authentication and authorization."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.core.logging import get_logger
from stationops.domain.services.access_policy import Capability, require
from stationops.infrastructure.auth import (
    SessionTokenError,
    SessionTokenExpiredError,
    jwt_service,
)
from stationops.infrastructure.persistence.database import get_db_session
from stationops.infrastructure.services.email_service import (
    EmailService,
    get_email_service,
)

logger = get_logger(__name__)


@dataclass
class CurrentUser:
    """The caller, as described by a valid access token."""

    user_id: str
    email: str
    role: str


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
            or expired.
    """
    if authorization is None:
        logger.info("Authentication failed: missing Authorization header")
        raise _unauthorized("Missing Authorization header")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.info("Authentication failed: invalid Authorization header format")
        raise _unauthorized("Could not validate credentials")

    try:
        payload = jwt_service.validate_access_token(parts[1])
        return CurrentUser(
            user_id=payload["user_id"],
            email=payload["email"],
            role=payload["role"],
        )
    except SessionTokenExpiredError:
        logger.info("Authentication failed: token expired")
        raise _unauthorized("Token has expired")
    except SessionTokenError as e:
        logger.info("Authentication failed: invalid token", error=str(e))
        raise _unauthorized("Invalid token")
    except KeyError as e:
        logger.warning("Authentication failed: missing claim in token", missing_claim=str(e))
        raise _unauthorized(f"Missing claim: {e}")


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
Mailer = Annotated[EmailService, Depends(get_email_service)]


def require_capability(
    capability: Capability,
) -> Callable[[CurrentUser], Awaitable[CurrentUser]]:
    """Build a dependency that admits only callers holding a capability.

    Example:
        @router.get("")
        async def list_things(
            current_user: Annotated[CurrentUser, Depends(require_capability(Capability.VIEW_CLIENTS))],
        ): ...
    """

    async def dependency(current_user: AuthenticatedUser) -> CurrentUser:
        require(current_user.role, capability)
        return current_user

    return dependency
