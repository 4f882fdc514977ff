"""Invitation state classification.

An invitation row is redeemable iff it has not been accepted and the current
time is strictly before its expiry. Everything here is a pure function of
``accepted_at`` and ``expires_at``, so it works on ORM rows and plain objects
alike.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Protocol


class SupportsRedemption(Protocol):
    accepted_at: datetime | None
    expires_at: datetime


class RedemptionStatus(str, Enum):
    """Outcome of looking an invitation up by its token."""

    NOT_FOUND = "not_found"
    ALREADY_USED = "already_used"
    EXPIRED = "expired"
    VALID = "valid"


class InvitationStatus(str, Enum):
    """Status shown in invitation listings."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"


@dataclass(frozen=True)
class InvitationLookup:
    """Result of a token lookup.

    Attributes:
        status: Exactly one of the four redemption states.
        invitation: The matching row, or None when the token is unknown.
    """

    status: RedemptionStatus
    invitation: Any | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is RedemptionStatus.VALID


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (SQLite returns these) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def classify_invitation(
    invitation: SupportsRedemption | None,
    now: datetime | None = None,
) -> RedemptionStatus:
    """Classify an invitation for redemption.

    Args:
        invitation: Invitation found by token, or None if no row matched.
        now: Reference time. Defaults to the current UTC time.

    Returns:
        NOT_FOUND, ALREADY_USED, EXPIRED or VALID, checked in that order.
    """
    if invitation is None:
        return RedemptionStatus.NOT_FOUND
    if invitation.accepted_at is not None:
        return RedemptionStatus.ALREADY_USED
    now = as_utc(now) if now is not None else datetime.now(timezone.utc)
    if now >= as_utc(invitation.expires_at):
        return RedemptionStatus.EXPIRED
    return RedemptionStatus.VALID


def invitation_status(
    invitation: SupportsRedemption,
    now: datetime | None = None,
) -> InvitationStatus:
    """Listing status of an existing invitation."""
    status = classify_invitation(invitation, now)
    if status is RedemptionStatus.ALREADY_USED:
        return InvitationStatus.ACCEPTED
    if status is RedemptionStatus.EXPIRED:
        return InvitationStatus.EXPIRED
    return InvitationStatus.PENDING
