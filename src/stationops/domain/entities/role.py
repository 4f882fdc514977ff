"""User roles."""

from enum import Enum


class UserRole(str, Enum):
    """Role assigned to a user profile.

    Staff roles (admin, manager, employee) work inside the station; clients
    are advertisers with access to their own campaigns and invoices.
    """

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"
    CLIENT = "client"

    @property
    def has_department(self) -> bool:
        """Whether a department is meaningful for this role."""
        return self in (UserRole.EMPLOYEE, UserRole.MANAGER)
