"""Tests for the renewal state machine."""
import pytest

from lease_renewal.core.enums import ErrorCode, RenewalState
from lease_renewal.core.exceptions import RenewalStateError
from lease_renewal.models.domain.renewal import RenewalStatus
from lease_renewal.services.state_tracker import RenewalStateTracker


@pytest.fixture
def tracker():
    return RenewalStateTracker()


class TestRenewalStateTracker:
    """Tests for RenewalStateTracker."""

    def test_resolve_defaults_without_storing(self, tracker):
        status = tracker.resolve(1)

        assert status == RenewalStatus(last_renewed=0, next_eligible=0, active=True, extensions=0)
        assert tracker.get_status(1) is None
        assert tracker.state_of(1) == RenewalState.UNINITIALIZED

    def test_suspended_lease_rejected(self, tracker):
        status = RenewalStatus(active=False)

        with pytest.raises(RenewalStateError) as exc:
            tracker.ensure_eligible(status, now=1_000)
        assert exc.value.code == ErrorCode.RENEWAL_IN_PROGRESS

    def test_suspension_checked_before_window(self, tracker):
        status = RenewalStatus(next_eligible=200, active=False)

        with pytest.raises(RenewalStateError) as exc:
            tracker.ensure_eligible(status, now=150)
        assert exc.value.code == ErrorCode.RENEWAL_IN_PROGRESS

    def test_inside_window_rejected(self, tracker):
        status = RenewalStatus(next_eligible=200)

        with pytest.raises(RenewalStateError) as exc:
            tracker.ensure_eligible(status, now=199)
        assert exc.value.code == ErrorCode.GRACE_PERIOD_EXCEEDED

    def test_window_boundary_is_eligible(self, tracker):
        tracker.ensure_eligible(RenewalStatus(next_eligible=200), now=200)

    def test_record_renewal_advances_status(self, tracker, sample_rules):
        previous = RenewalStatus(last_renewed=50, next_eligible=60, active=True, extensions=2)

        status = tracker.record_renewal(1, previous, now=100, rules=sample_rules)

        assert status == RenewalStatus(last_renewed=100, next_eligible=110, active=True, extensions=3)
        assert tracker.get_status(1) == status
        assert tracker.state_of(1) == RenewalState.ACTIVE

    def test_state_of_suspended(self, tracker):
        tracker.repo.save(1, RenewalStatus(active=False))
        assert tracker.state_of(1) == RenewalState.SUSPENDED
