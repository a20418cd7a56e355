"""Payment history evaluator for renewal thresholds."""

from typing import Sequence

from lease_renewal.core.exceptions import CalculationError
from lease_renewal.models.domain.lease import LeaseRules, PaymentRecord
from lease_renewal.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from lease_renewal.services.rule_engine.ratio import (
    calculate_on_time_ratio,
    count_on_time,
)


class PaymentHistoryEvaluator(RuleEvaluator):
    """
    Evaluator for the renewal threshold of a lease.

    Handles:
    - Minimum payment count: history length must reach min_payments
    - On-time ratio: ratio must reach the rule threshold

    Both requirements must hold; neither alone is sufficient.
    """

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate a lease's payment history against its rules.

        Args:
            context: EvaluationContext with rules and payment history

        Returns:
            EvaluationResult with ratio, counts, and evidence
        """
        rules = context.rules
        history = context.history

        total = len(history)
        on_time = count_on_time(history)
        ratio = self._safe_ratio(history, rules.period)

        enough_payments = total >= rules.min_payments
        ratio_met = ratio >= rules.threshold
        passed = enough_payments and ratio_met

        if passed:
            reason = (
                f"On-time ratio {ratio}% meets threshold of {rules.threshold}% "
                f"over {total} payments"
            )
        elif not enough_payments:
            reason = (
                f"{total} payments recorded, {rules.min_payments} required"
            )
        else:
            reason = (
                f"On-time ratio {ratio}% is below threshold of {rules.threshold}% "
                f"(gap: {rules.threshold - ratio})"
            )

        return EvaluationResult(
            passed=passed,
            ratio=ratio,
            on_time_count=on_time,
            total_count=total,
            reason=reason,
            evidence={
                "ratio": ratio,
                "required_ratio": rules.threshold,
                "payments": total,
                "required_payments": rules.min_payments,
                "period": rules.period,
            },
        )

    def _safe_ratio(self, history: Sequence[PaymentRecord], period: int) -> int:
        """Compute the ratio, treating a calculation failure as 0."""
        try:
            return calculate_on_time_ratio(history, period)
        except CalculationError:
            return 0


def meets_threshold(history: Sequence[PaymentRecord], rules: LeaseRules) -> bool:
    """Return True iff the history satisfies both the count and ratio rules."""
    context = EvaluationContext(lease_id=0, rules=rules, history=list(history))
    return PaymentHistoryEvaluator().evaluate(context).passed
