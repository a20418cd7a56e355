"""On-time payment ratio calculation."""

from typing import Sequence

from lease_renewal.core.enums import ErrorCode
from lease_renewal.core.exceptions import CalculationError
from lease_renewal.models.domain.lease import PaymentRecord


def count_on_time(history: Sequence[PaymentRecord]) -> int:
    return sum(1 for payment in history if payment.on_time)


def calculate_on_time_ratio(history: Sequence[PaymentRecord], period: int) -> int:
    """
    Compute the on-time payment percentage of a history.

    The numerator is the on-time count of the whole history while the
    denominator is capped at ``period``, so a history longer than the
    period can reach 100 even with some late payments. This is not a
    sliding window over the most recent payments.

    Args:
        history: Ordered payment history
        period: Lookback window in payment-count units

    Returns:
        Integer percent in [0, 100], rounded down

    Raises:
        CalculationError: PERIOD_MISMATCH if the capped sample size is zero
    """
    period_payments = min(len(history), period)
    if period_payments <= 0:
        raise CalculationError(
            ErrorCode.PERIOD_MISMATCH,
            "No payments in the evaluation period",
        )

    # Exact integer floor; a float quotient floors some values one lower (29/100 -> 28)
    ratio = count_on_time(history) * 100 // period_payments
    return min(ratio, 100)
