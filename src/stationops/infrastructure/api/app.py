"""FastAPI application factory and configuration.

Builds the StationOps API with its middleware, routes, exception handlers
and lifecycle hooks.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stationops.core.config import get_settings
from stationops.core.exceptions import StationOpsError
from stationops.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from stationops.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)

# HTTP status for each domain error code. Unlisted codes map to 400.
ERROR_STATUS: dict[str, int] = {
    "permission_denied": status.HTTP_403_FORBIDDEN,
    "invalid_invitation": status.HTTP_400_BAD_REQUEST,
    "duplicate_invitation": status.HTTP_409_CONFLICT,
    "email_already_registered": status.HTTP_409_CONFLICT,
    "invitation_not_found": status.HTTP_404_NOT_FOUND,
    "invalid_token": status.HTTP_404_NOT_FOUND,
    "invitation_already_used": status.HTTP_409_CONFLICT,
    "invitation_expired": status.HTTP_410_GONE,
    "weak_password": status.HTTP_400_BAD_REQUEST,
    "invalid_display_name": status.HTTP_400_BAD_REQUEST,
    "account_creation_failed": status.HTTP_400_BAD_REQUEST,
    "profile_sync_failed": status.HTTP_503_SERVICE_UNAVAILABLE,
    "not_found": status.HTTP_404_NOT_FOUND,
    "id_sequence_exhausted": status.HTTP_409_CONFLICT,
    "invalid_credentials": status.HTTP_401_UNAUTHORIZED,
    "authentication_required": status.HTTP_401_UNAUTHORIZED,
    "invalid_record": status.HTTP_400_BAD_REQUEST,
    "invalid_leave_request": status.HTTP_400_BAD_REQUEST,
    "invalid_leave_transition": status.HTTP_409_CONFLICT,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database on startup and release it on shutdown."""
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting StationOps",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down StationOps")
    await close_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Back-office API for radio station operations",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    @app.get("/health", tags=["health"])
    async def health_check():
        """Returns 200 while the process is up. Does not touch the database."""
        return {
            "status": "healthy",
            "service": "StationOps",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Returns 200 once the database answers, 503 otherwise."""
        if await get_db_manager().check_connection():
            return {"status": "ready", "database": "connected"}
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "database": "disconnected"},
        )


def register_routes(app: FastAPI) -> None:
    from stationops.infrastructure.api.routes import (
        auth_router,
        clients_router,
        employees_router,
        ids_router,
        invitations_router,
        leave_router,
        schedule_router,
        users_router,
    )

    prefix = get_settings().api_prefix

    app.include_router(auth_router, prefix=f"{prefix}/auth", tags=["auth"])
    app.include_router(invitations_router, prefix=f"{prefix}/invitations", tags=["invitations"])
    app.include_router(users_router, prefix=f"{prefix}/users", tags=["users"])
    app.include_router(clients_router, prefix=f"{prefix}/clients", tags=["clients"])
    app.include_router(employees_router, prefix=f"{prefix}/employees", tags=["employees"])
    app.include_router(ids_router, prefix=f"{prefix}/ids", tags=["ids"])
    app.include_router(schedule_router, prefix=f"{prefix}/schedule", tags=["schedule"])
    app.include_router(leave_router, prefix=f"{prefix}/leave-requests", tags=["leave"])


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StationOpsError)
    async def domain_error_handler(request: Request, exc: StationOpsError):
        status_code = ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST)
        logger.info(
            "Request rejected",
            path=request.url.path,
            error=exc.code,
            status_code=status_code,
        )
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code, "message": exc.message, "details": exc.details},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "internal_error",
                "message": str(exc) if get_settings().debug else "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Bind a correlation ID to every log line of the request."""
        correlation_id = request.headers.get("X-Correlation-ID") or new_correlation_id()
        bind_correlation_id(correlation_id)
        logger.info("Request started", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


app = create_app()
