"""Rule engine for evaluating payment histories against lease rules."""

from .base import EvaluationContext, EvaluationResult, RuleEvaluator
from .evaluators import PaymentHistoryEvaluator, meets_threshold
from .ratio import calculate_on_time_ratio, count_on_time

__all__ = [
    "EvaluationContext",
    "EvaluationResult",
    "PaymentHistoryEvaluator",
    "RuleEvaluator",
    "calculate_on_time_ratio",
    "count_on_time",
    "meets_threshold",
]
