"""Interfaces to the external payment tracker and lease factory."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from lease_renewal.core.enums import ErrorCode
from lease_renewal.core.exceptions import CollaboratorError
from lease_renewal.models.domain.lease import PaymentRecord


class PaymentTracker(ABC):
    """Read access to per-lease payment history."""

    @abstractmethod
    def get_history(self, lease_id: int) -> List[PaymentRecord]:
        """
        Return the ordered payment history of a lease.

        Raises:
            CollaboratorError: NO_PAYMENT_HISTORY if the lease is unknown
        """


class LeaseFactory(ABC):
    """Query and update access to lease terms."""

    @abstractmethod
    def get_term(self, lease_id: int) -> int:
        """
        Return the current term of a lease.

        Raises:
            CollaboratorError: LEASE_NOT_FOUND if the lease is unknown
        """

    @abstractmethod
    def update_term(self, lease_id: int, new_term: int) -> bool:
        """
        Persist a new term for a lease.

        Returns:
            True if the update was applied

        Raises:
            CollaboratorError: UPDATE_FAILED if the update was refused
        """


class InMemoryPaymentTracker(PaymentTracker):
    """Payment tracker backed by a dict, used by the HTTP host and tests."""

    def __init__(self):
        self.history: Dict[int, List[PaymentRecord]] = {}

    def record_payments(self, lease_id: int, payments: Iterable[PaymentRecord]) -> None:
        self.history.setdefault(lease_id, []).extend(payments)

    def get_history(self, lease_id: int) -> List[PaymentRecord]:
        if lease_id not in self.history:
            raise CollaboratorError(
                ErrorCode.NO_PAYMENT_HISTORY,
                f"No payment history for lease {lease_id}",
            )
        return list(self.history[lease_id])


class InMemoryLeaseFactory(LeaseFactory):
    """Lease factory backed by a dict, used by the HTTP host and tests."""

    def __init__(self):
        self.terms: Dict[int, int] = {}

    def get_term(self, lease_id: int) -> int:
        if lease_id not in self.terms:
            raise CollaboratorError(
                ErrorCode.LEASE_NOT_FOUND,
                f"Lease {lease_id} not found",
            )
        return self.terms[lease_id]

    def update_term(self, lease_id: int, new_term: int) -> bool:
        self.terms[lease_id] = new_term
        return True
