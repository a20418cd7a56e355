"""Renewal state machine for individual leases."""

from typing import Optional

from lease_renewal.core.enums import ErrorCode, RenewalState
from lease_renewal.core.exceptions import RenewalStateError
from lease_renewal.models.domain.lease import LeaseRules
from lease_renewal.models.domain.renewal import RenewalStatus
from lease_renewal.repositories.renewal_repository import RenewalStatusRepository


class RenewalStateTracker:
    """
    Tracks renewal status per lease and enforces the eligibility window.

    States:
    - UNINITIALIZED: no status stored yet
    - ACTIVE: renewals permitted once the eligibility window has passed
    - SUSPENDED: active flag cleared; every attempt is rejected

    The tracker never moves a lease from SUSPENDED back to ACTIVE;
    reactivation belongs to the host.
    """

    def __init__(self, repo: Optional[RenewalStatusRepository] = None):
        self.repo = repo or RenewalStatusRepository()

    def get_status(self, lease_id: int) -> Optional[RenewalStatus]:
        return self.repo.get_by_id(lease_id)

    def resolve(self, lease_id: int) -> RenewalStatus:
        """Return the stored status, or a fresh default that is not stored."""
        status = self.repo.get_by_id(lease_id)
        if status is None:
            return RenewalStatus()
        return status

    def state_of(self, lease_id: int) -> RenewalState:
        status = self.repo.get_by_id(lease_id)
        if status is None:
            return RenewalState.UNINITIALIZED
        return RenewalState.ACTIVE if status.active else RenewalState.SUSPENDED

    def ensure_eligible(self, status: RenewalStatus, now: int) -> None:
        """
        Reject renewal attempts on suspended leases or inside the window.

        Args:
            status: Resolved status of the lease
            now: Current block height

        Raises:
            RenewalStateError: RENEWAL_IN_PROGRESS if the lease is suspended,
                GRACE_PERIOD_EXCEEDED if now is before next_eligible
        """
        if not status.active:
            raise RenewalStateError(
                ErrorCode.RENEWAL_IN_PROGRESS,
                "Renewal is suspended for this lease",
            )
        if now < status.next_eligible:
            raise RenewalStateError(
                ErrorCode.GRACE_PERIOD_EXCEEDED,
                f"Lease is not eligible for renewal until block {status.next_eligible}",
            )

    def record_renewal(
        self,
        lease_id: int,
        status: RenewalStatus,
        now: int,
        rules: LeaseRules,
    ) -> RenewalStatus:
        """Store and return the status that follows a successful renewal."""
        return self.repo.save(lease_id, status.advanced(now, rules.period))
