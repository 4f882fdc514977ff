"""Repositories wrapping an AsyncSession per aggregate."""

from stationops.infrastructure.persistence.repositories.id_sequence_repository import (
    IdSequenceRepository,
)
from stationops.infrastructure.persistence.repositories.invitation_repository import (
    InvitationRepository,
)
from stationops.infrastructure.persistence.repositories.leave_repository import (
    LeaveRequestRepository,
)
from stationops.infrastructure.persistence.repositories.record_repositories import (
    ClientRepository,
    EmployeeRepository,
)
from stationops.infrastructure.persistence.repositories.schedule_repository import (
    ScheduleRepository,
)
from stationops.infrastructure.persistence.repositories.user_repository import (
    ProfileRepository,
    UserRepository,
)

__all__ = [
    "ClientRepository",
    "EmployeeRepository",
    "IdSequenceRepository",
    "InvitationRepository",
    "LeaveRequestRepository",
    "ProfileRepository",
    "ScheduleRepository",
    "UserRepository",
]
