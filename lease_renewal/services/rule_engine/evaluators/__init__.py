"""Rule evaluators for lease renewal rules."""

from .payment_evaluator import PaymentHistoryEvaluator, meets_threshold

__all__ = [
    "PaymentHistoryEvaluator",
    "meets_threshold",
]
