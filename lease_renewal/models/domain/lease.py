"""Lease rule and payment domain models."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LeaseRules:
    """
    Renewal rules for a single lease (or the fallback built from defaults).

    Attributes:
        threshold: Minimum on-time ratio, integer percent (1-100)
        period: Lookback window in payment-count units
        duration_extension: Term units added on a successful renewal
        min_payments: Minimum number of recorded payments
        grace_days: Lease grace days, bounded by the global grace ceiling
    """

    threshold: int
    period: int
    duration_extension: int
    min_payments: int
    grace_days: int


@dataclass(frozen=True)
class PaymentRecord:
    """A single payment as reported by the payment tracker."""

    amount: Decimal
    timestamp: int
    on_time: bool
