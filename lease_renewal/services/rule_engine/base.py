"""Rule engine foundation with evaluation context, results, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from lease_renewal.models.domain.lease import LeaseRules, PaymentRecord


@dataclass
class EvaluationContext:
    """
    Evaluation context containing everything needed to judge a lease.

    Attributes:
        lease_id: The lease being evaluated
        rules: The resolved rules (stored or fallback)
        history: Ordered payment history from the payment tracker
    """

    lease_id: int
    rules: LeaseRules
    history: List[PaymentRecord]


@dataclass
class EvaluationResult:
    """
    Result of evaluating a lease's payment history against its rules.

    Attributes:
        passed: Whether both the payment count and ratio requirements hold
        ratio: On-time ratio in percent (0 when it could not be computed)
        on_time_count: Number of on-time payments in the whole history
        total_count: Number of payments in the history
        reason: Human-readable explanation of the result
        evidence: Structured actual vs. required values
    """

    passed: bool
    ratio: int = 0
    on_time_count: int = 0
    total_count: int = 0
    reason: Optional[str] = None
    evidence: dict = field(default_factory=dict)


class RuleEvaluator(ABC):
    """
    Abstract base class for rule evaluators using the Strategy pattern.

    Subclasses implement evaluate() for one aspect of a lease and must not
    mutate the context or any store.
    """

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate a lease against the provided context.

        Args:
            context: EvaluationContext with rules and payment history

        Returns:
            EvaluationResult with verdict, reason, and evidence
        """
        pass
