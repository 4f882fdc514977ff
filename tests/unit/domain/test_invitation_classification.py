"""Unit tests for invitation redemption classification."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from stationops.domain.entities.invitation import (
    InvitationLookup,
    InvitationStatus,
    RedemptionStatus,
    classify_invitation,
    invitation_status,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_invitation(expires_at=None, accepted_at=None):
    return SimpleNamespace(
        expires_at=expires_at or NOW + timedelta(days=7),
        accepted_at=accepted_at,
    )


class TestClassifyInvitation:
    def test_missing_invitation_is_not_found(self):
        assert classify_invitation(None, NOW) is RedemptionStatus.NOT_FOUND

    def test_unaccepted_before_expiry_is_valid(self):
        assert classify_invitation(make_invitation(), NOW) is RedemptionStatus.VALID

    def test_expiry_instant_is_already_expired(self):
        invitation = make_invitation(expires_at=NOW)
        assert classify_invitation(invitation, NOW) is RedemptionStatus.EXPIRED

    def test_one_second_before_expiry_is_valid(self):
        invitation = make_invitation(expires_at=NOW + timedelta(seconds=1))
        assert classify_invitation(invitation, NOW) is RedemptionStatus.VALID

    def test_accepted_wins_over_expired(self):
        invitation = make_invitation(
            expires_at=NOW - timedelta(days=1),
            accepted_at=NOW - timedelta(days=2),
        )
        assert classify_invitation(invitation, NOW) is RedemptionStatus.ALREADY_USED

    def test_naive_datetimes_are_treated_as_utc(self):
        invitation = make_invitation(expires_at=datetime(2024, 6, 1, 11, 59))
        assert classify_invitation(invitation, NOW) is RedemptionStatus.EXPIRED

    def test_defaults_to_current_time(self):
        invitation = make_invitation(expires_at=datetime.now(timezone.utc) - timedelta(minutes=1))
        assert classify_invitation(invitation) is RedemptionStatus.EXPIRED


class TestInvitationStatus:
    def test_listing_statuses(self):
        assert invitation_status(make_invitation(), NOW) is InvitationStatus.PENDING
        assert (
            invitation_status(make_invitation(expires_at=NOW - timedelta(hours=1)), NOW)
            is InvitationStatus.EXPIRED
        )
        assert (
            invitation_status(make_invitation(accepted_at=NOW), NOW)
            is InvitationStatus.ACCEPTED
        )


def test_lookup_is_valid_only_for_valid_status():
    assert InvitationLookup(status=RedemptionStatus.VALID).is_valid is True
    for status in (
        RedemptionStatus.NOT_FOUND,
        RedemptionStatus.ALREADY_USED,
        RedemptionStatus.EXPIRED,
    ):
        assert InvitationLookup(status=status).is_valid is False
