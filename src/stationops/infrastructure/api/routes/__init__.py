"""API routes for StationOps."""

from stationops.infrastructure.api.routes.auth_router import router as auth_router
from stationops.infrastructure.api.routes.invitations_router import router as invitations_router
from stationops.infrastructure.api.routes.leave_router import router as leave_router
from stationops.infrastructure.api.routes.records_router import (
    clients_router,
    employees_router,
    ids_router,
)
from stationops.infrastructure.api.routes.schedule_router import router as schedule_router
from stationops.infrastructure.api.routes.users_router import router as users_router

__all__ = [
    "auth_router",
    "clients_router",
    "employees_router",
    "ids_router",
    "invitations_router",
    "leave_router",
    "schedule_router",
    "users_router",
]
