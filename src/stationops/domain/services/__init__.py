"""Domain services for StationOps.

Pure business rules (ID formatting, password policy, access policy, the
weekly grid) sit beside the session-backed services that apply them.
"""

from stationops.domain.services.access_policy import (
    ROLE_CAPABILITIES,
    Capability,
    can,
    require,
    require_invite,
)
from stationops.domain.services.human_id_generator import (
    HumanIdExhaustedError,
    HumanIdGenerator,
)
from stationops.domain.services.password_validator import (
    PasswordValidationError,
    PasswordValidator,
    default_password_validator,
)
from stationops.domain.services.week_grid import GridDay, build_week_grid

__all__ = [
    "Capability",
    "GridDay",
    "HumanIdExhaustedError",
    "HumanIdGenerator",
    "PasswordValidationError",
    "PasswordValidator",
    "ROLE_CAPABILITIES",
    "build_week_grid",
    "can",
    "default_password_validator",
    "require",
    "require_invite",
]
