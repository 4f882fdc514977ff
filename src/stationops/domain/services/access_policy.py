"""Role-based access policy.

Every permission check in the service goes through this module. Capabilities
are granted per role in ``ROLE_CAPABILITIES``; nothing else decides who may
do what.
"""

from enum import Enum

from stationops.core.exceptions import PermissionDeniedError
from stationops.domain.entities.role import UserRole


class Capability(str, Enum):
    """Actions guarded by the access policy."""

    INVITE_USERS = "invite_users"
    VIEW_INVITATIONS = "view_invitations"
    DELETE_INVITATIONS = "delete_invitations"
    ASSIGN_ADMIN_ROLE = "assign_admin_role"
    VIEW_USERS = "view_users"
    MANAGE_CLIENTS = "manage_clients"
    VIEW_CLIENTS = "view_clients"
    MANAGE_EMPLOYEES = "manage_employees"
    VIEW_EMPLOYEES = "view_employees"
    MANAGE_SCHEDULE = "manage_schedule"
    VIEW_SCHEDULE = "view_schedule"
    REQUEST_LEAVE = "request_leave"
    MANAGE_LEAVE = "manage_leave"


_MANAGER_CAPABILITIES = frozenset(
    {
        Capability.INVITE_USERS,
        Capability.VIEW_INVITATIONS,
        Capability.VIEW_USERS,
        Capability.MANAGE_CLIENTS,
        Capability.VIEW_CLIENTS,
        Capability.MANAGE_EMPLOYEES,
        Capability.VIEW_EMPLOYEES,
        Capability.MANAGE_SCHEDULE,
        Capability.VIEW_SCHEDULE,
        Capability.REQUEST_LEAVE,
        Capability.MANAGE_LEAVE,
    }
)

ROLE_CAPABILITIES: dict[UserRole, frozenset[Capability]] = {
    UserRole.ADMIN: frozenset(Capability),
    UserRole.MANAGER: _MANAGER_CAPABILITIES,
    UserRole.EMPLOYEE: frozenset(
        {
            Capability.VIEW_CLIENTS,
            Capability.VIEW_SCHEDULE,
            Capability.REQUEST_LEAVE,
        }
    ),
    UserRole.CLIENT: frozenset(),
}


def _coerce_role(role: UserRole | str | None) -> UserRole | None:
    if role is None:
        return None
    try:
        return UserRole(role)
    except ValueError:
        return None


def can(role: UserRole | str | None, capability: Capability) -> bool:
    """Return whether a role holds a capability. Unknown roles hold none."""
    resolved = _coerce_role(role)
    if resolved is None:
        return False
    return capability in ROLE_CAPABILITIES[resolved]


def require(role: UserRole | str | None, capability: Capability) -> None:
    """Raise PermissionDeniedError unless the role holds the capability."""
    if not can(role, capability):
        raise PermissionDeniedError(
            f"Role '{role}' is not allowed to {capability.value.replace('_', ' ')}",
            details=[{"capability": capability.value}],
        )


def require_invite(inviter_role: UserRole | str | None, target_role: UserRole) -> None:
    """Check that the inviter may invite someone with the target role.

    Inviting at all needs INVITE_USERS; handing out the admin role needs
    ASSIGN_ADMIN_ROLE on top.
    """
    require(inviter_role, Capability.INVITE_USERS)
    if UserRole(target_role) is UserRole.ADMIN:
        require(inviter_role, Capability.ASSIGN_ADMIN_ROLE)
