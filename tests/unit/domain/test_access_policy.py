"""Unit tests for the role-based access policy."""

import pytest

from stationops.core.exceptions import PermissionDeniedError
from stationops.domain.entities.role import UserRole
from stationops.domain.services.access_policy import (
    ROLE_CAPABILITIES,
    Capability,
    can,
    require,
    require_invite,
)


class TestCan:
    def test_admin_holds_every_capability(self):
        assert all(can(UserRole.ADMIN, capability) for capability in Capability)

    def test_manager_cannot_delete_invitations_or_grant_admin(self):
        assert can(UserRole.MANAGER, Capability.INVITE_USERS) is True
        assert can(UserRole.MANAGER, Capability.VIEW_INVITATIONS) is True
        assert can(UserRole.MANAGER, Capability.DELETE_INVITATIONS) is False
        assert can(UserRole.MANAGER, Capability.ASSIGN_ADMIN_ROLE) is False

    def test_employee_reads_and_requests_leave(self):
        assert ROLE_CAPABILITIES[UserRole.EMPLOYEE] == {
            Capability.VIEW_CLIENTS,
            Capability.VIEW_SCHEDULE,
            Capability.REQUEST_LEAVE,
        }
        assert can("employee", Capability.INVITE_USERS) is False

    def test_client_holds_nothing(self):
        assert not any(can(UserRole.CLIENT, capability) for capability in Capability)

    @pytest.mark.parametrize("role", [None, "", "superuser"])
    def test_unknown_role_holds_nothing(self, role):
        assert can(role, Capability.VIEW_CLIENTS) is False


class TestRequire:
    def test_passes_silently_when_allowed(self):
        require("manager", Capability.MANAGE_CLIENTS)

    def test_raises_with_capability_detail(self):
        with pytest.raises(PermissionDeniedError) as exc_info:
            require("employee", Capability.MANAGE_EMPLOYEES)
        assert exc_info.value.code == "permission_denied"
        assert exc_info.value.details == [{"capability": "manage_employees"}]


class TestRequireInvite:
    @pytest.mark.parametrize(
        "target", [UserRole.ADMIN, UserRole.MANAGER, UserRole.EMPLOYEE, UserRole.CLIENT]
    )
    def test_admin_may_invite_any_role(self, target):
        require_invite(UserRole.ADMIN, target)

    @pytest.mark.parametrize("target", [UserRole.MANAGER, UserRole.EMPLOYEE, UserRole.CLIENT])
    def test_manager_may_invite_non_admin_roles(self, target):
        require_invite(UserRole.MANAGER, target)

    def test_manager_may_not_invite_admin(self):
        with pytest.raises(PermissionDeniedError):
            require_invite(UserRole.MANAGER, UserRole.ADMIN)

    def test_employee_may_not_invite(self):
        with pytest.raises(PermissionDeniedError):
            require_invite(UserRole.EMPLOYEE, UserRole.CLIENT)
