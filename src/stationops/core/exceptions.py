"""Typed errors raised by StationOps services.

Every error carries a machine-readable ``code`` and a message that is safe
to show to the end user. The API layer maps each class to an HTTP status.
"""

from typing import Any


class StationOpsError(Exception):
    """Base class for all domain errors."""

    code: str = "error"
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None, details: list[dict[str, Any]] | None = None) -> None:
        self.message = message or self.default_message
        self.details = details or []
        super().__init__(self.message)


class PermissionDeniedError(StationOpsError):
    code = "permission_denied"
    default_message = "You do not have permission to perform this action"


# Invitation creation


class InvalidInvitationError(StationOpsError):
    code = "invalid_invitation"
    default_message = "Please enter an email address"


class DuplicateInvitationError(StationOpsError):
    code = "duplicate_invitation"
    default_message = "An invitation has already been sent to this email"


class EmailAlreadyRegisteredError(StationOpsError):
    code = "email_already_registered"
    default_message = "A user with this email already exists"


class InvitationNotFoundError(StationOpsError):
    code = "invitation_not_found"
    default_message = "Invitation not found"


# Invitation redemption


class InvalidTokenError(StationOpsError):
    """The token does not resolve to any invitation.

    The message deliberately reads "invalid or expired" so the end user
    cannot tell an unknown token from an expired one.
    """

    code = "invalid_token"
    default_message = "Invalid or expired invitation link"


class InvitationAlreadyUsedError(StationOpsError):
    code = "invitation_already_used"
    default_message = "This invitation has already been used"


class InvitationExpiredError(StationOpsError):
    code = "invitation_expired"
    default_message = (
        "This invitation has expired. Please ask your administrator for a new invitation"
    )


class WeakPasswordError(StationOpsError):
    code = "weak_password"
    default_message = "Please meet all password requirements"


class InvalidDisplayNameError(StationOpsError):
    code = "invalid_display_name"
    default_message = "Please enter your full name"


class AccountCreationFailedError(StationOpsError):
    code = "account_creation_failed"
    default_message = "Could not create the account"


class ProfileSyncFailedError(StationOpsError):
    code = "profile_sync_failed"
    default_message = (
        "Your account could not be set up right now. The invitation is still valid, please try again"
    )


# Records


class RecordNotFoundError(StationOpsError):
    code = "not_found"
    default_message = "Record not found"


# Authentication


class InvalidCredentialsError(StationOpsError):
    code = "invalid_credentials"
    default_message = "Invalid email or password"


class AuthenticationRequiredError(StationOpsError):
    code = "authentication_required"
    default_message = "Authentication required"


class InvalidRecordError(StationOpsError):
    code = "invalid_record"
    default_message = "The record cannot be saved with these values"


# Leave


class InvalidLeaveRequestError(StationOpsError):
    code = "invalid_leave_request"
    default_message = "Invalid leave request"


class LeaveTransitionError(StationOpsError):
    """The leave request is no longer pending."""

    code = "invalid_leave_transition"
    default_message = "Only pending leave requests can be changed"
