"""Renewal engine for orchestrating lease renewal decisions."""

import logging
from typing import Any, Dict, List, Optional

from lease_renewal.config import settings
from lease_renewal.core.enums import ErrorCode, RenewalState
from lease_renewal.core.exceptions import (
    CollaboratorError,
    RenewalError,
    ThresholdNotMetError,
)
from lease_renewal.models.domain.lease import LeaseRules, PaymentRecord
from lease_renewal.models.domain.policy import PolicyConfig
from lease_renewal.models.domain.renewal import EvaluationRecord, RenewalStatus
from lease_renewal.repositories.evaluation_repository import EvaluationRepository
from lease_renewal.services.access_control import AccessController
from lease_renewal.services.clock import BlockClock
from lease_renewal.services.collaborators import LeaseFactory, PaymentTracker
from lease_renewal.services.rule_engine import (
    EvaluationContext,
    EvaluationResult,
    PaymentHistoryEvaluator,
)
from lease_renewal.services.rule_store import LeaseRuleStore, validate_lease_id
from lease_renewal.services.state_tracker import RenewalStateTracker

logger = logging.getLogger(__name__)


class RenewalEngine:
    """
    Renewal engine to orchestrate renewal attempts.

    This class:
    - Resolves lease rules from the rule store (or the default fallback)
    - Fetches payment history from the payment tracker
    - Enforces the renewal state machine and eligibility window
    - Extends the lease term through the lease factory
    - Appends an audit record for every successful renewal

    Each operation validates everything before its first write, so a
    failure never leaves a partial update behind. The engine expects its
    host to serialize calls and to advance the block clock.
    """

    def __init__(
        self,
        payment_tracker: PaymentTracker,
        lease_factory: LeaseFactory,
        policy: Optional[PolicyConfig] = None,
        clock: Optional[BlockClock] = None,
    ):
        """
        Initialize the renewal engine.

        Args:
            payment_tracker: Source of per-lease payment history
            lease_factory: Owner of lease terms
            policy: Global policy (built from settings if omitted)
            clock: Host block clock (starts at INITIAL_BLOCK_HEIGHT if omitted)
        """
        self.payment_tracker = payment_tracker
        self.lease_factory = lease_factory
        self.policy = policy or PolicyConfig.from_settings(settings)
        self.clock = clock or BlockClock(settings.INITIAL_BLOCK_HEIGHT)

        self.access = AccessController(self.policy)
        self.rule_store = LeaseRuleStore(self.policy)
        self.tracker = RenewalStateTracker()
        self.evaluations = EvaluationRepository(self.policy.max_evaluations)
        self.evaluator = PaymentHistoryEvaluator()

    # ===== Administrative Operations =====

    def set_oracle(self, caller: str, new_oracle: str) -> None:
        self.access.set_oracle(caller, new_oracle)

    def set_default_threshold(self, caller: str, threshold: int) -> None:
        self.access.set_default_threshold(caller, threshold)

    def set_default_period(self, caller: str, period: int) -> None:
        self.access.set_default_period(caller, period)

    def set_grace_period(self, caller: str, grace_period: int) -> None:
        self.access.set_grace_period(caller, grace_period)

    def set_lease_rules(self, lease_id: int, rules: LeaseRules) -> LeaseRules:
        """Validate and store rules for a lease. Open to any caller."""
        return self.rule_store.set_lease_rules(lease_id, rules)

    # ===== Renewal Operations =====

    def check_and_renew(self, lease_id: int) -> int:
        """
        Attempt to renew a lease and extend its term.

        Steps:
        1. Validate the lease id
        2. Resolve rules and fetch payment history
        3. Check the renewal state and eligibility window
        4. Evaluate the threshold
        5. Extend the term through the lease factory
        6. Advance the renewal status and append an audit record

        Args:
            lease_id: Lease to renew

        Returns:
            The new lease term

        Raises:
            RuleValidationError: INVALID_LEASE_ID
            CollaboratorError: NO_PAYMENT_HISTORY, LEASE_NOT_FOUND or UPDATE_FAILED
            RenewalStateError: RENEWAL_IN_PROGRESS or GRACE_PERIOD_EXCEEDED
            ThresholdNotMetError: THRESHOLD_FAILED
        """
        validate_lease_id(lease_id)
        rules = self.rule_store.resolve_rules(lease_id)
        history = self.payment_tracker.get_history(lease_id)
        status = self.tracker.resolve(lease_id)
        now = self.clock.height

        self.tracker.ensure_eligible(status, now)

        result = self._evaluate(lease_id, rules, history)
        if not result.passed:
            logger.debug(f"Lease {lease_id} failed renewal threshold: {result.reason}")
            raise ThresholdNotMetError(ErrorCode.THRESHOLD_FAILED, result.reason)

        new_term = self._extend_term(lease_id, rules)

        self.tracker.record_renewal(lease_id, status, now, rules)
        self.evaluations.append(
            lease_id=lease_id,
            timestamp=now,
            met_threshold=True,
            on_time_count=result.on_time_count,
            total_count=result.total_count,
            ratio=result.ratio,
        )

        logger.info(
            f"Renewed lease {lease_id} at block {now}: term {new_term}, "
            f"ratio {result.ratio}%, extension {status.extensions + 1}"
        )
        return new_term

    def manual_evaluation(self, caller: str, lease_id: int) -> bool:
        """
        Run an oracle-triggered evaluation and renew the lease if it qualifies.

        Returns False both when the threshold is not met and when the
        renewal attempt itself fails; the failure kind is logged only.

        Args:
            caller: Principal triggering the evaluation
            lease_id: Lease to evaluate

        Returns:
            True if the lease was renewed, False otherwise

        Raises:
            AuthorizationError: ORACLE_NOT_VERIFIED
            RuleValidationError: INVALID_LEASE_ID
            CollaboratorError: NO_PAYMENT_HISTORY
        """
        self.access.require_oracle(caller)
        validate_lease_id(lease_id)
        rules = self.rule_store.resolve_rules(lease_id)
        history = self.payment_tracker.get_history(lease_id)

        result = self._evaluate(lease_id, rules, history)
        if not result.passed:
            logger.info(f"Manual evaluation of lease {lease_id}: not renewed ({result.reason})")
            return False

        try:
            self.check_and_renew(lease_id)
        except RenewalError as e:
            logger.warning(
                f"Manual evaluation of lease {lease_id} met threshold but renewal "
                f"failed with {e.code.name} ({e.code.value}): {e.message}"
            )
            return False
        return True

    # ===== Queries =====

    def get_lease_rules(self, lease_id: int) -> Optional[LeaseRules]:
        return self.rule_store.get_lease_rules(lease_id)

    def get_evaluation_history(
        self, lease_id: int, evaluation_id: int
    ) -> Optional[EvaluationRecord]:
        return self.evaluations.get(lease_id, evaluation_id)

    def list_evaluations(self, lease_id: int) -> List[EvaluationRecord]:
        return self.evaluations.find_by_lease(lease_id)

    def get_renewal_status(self, lease_id: int) -> Optional[RenewalStatus]:
        return self.tracker.get_status(lease_id)

    def get_renewal_state(self, lease_id: int) -> RenewalState:
        return self.tracker.state_of(lease_id)

    def get_evaluation_count(self) -> int:
        return self.evaluations.next_evaluation_id

    def get_policy(self) -> Dict[str, Any]:
        return self.policy.snapshot()

    # ===== Internals =====

    def _evaluate(
        self,
        lease_id: int,
        rules: LeaseRules,
        history: List[PaymentRecord],
    ) -> EvaluationResult:
        context = EvaluationContext(lease_id=lease_id, rules=rules, history=history)
        return self.evaluator.evaluate(context)

    def _extend_term(self, lease_id: int, rules: LeaseRules) -> int:
        """
        Add the rule extension to the lease term through the lease factory.

        Raises:
            CollaboratorError: LEASE_NOT_FOUND or UPDATE_FAILED
        """
        try:
            current_term = self.lease_factory.get_term(lease_id)
        except CollaboratorError as e:
            raise CollaboratorError(ErrorCode.LEASE_NOT_FOUND, e.message) from e

        new_term = current_term + rules.duration_extension

        try:
            updated = self.lease_factory.update_term(lease_id, new_term)
        except CollaboratorError as e:
            raise CollaboratorError(ErrorCode.UPDATE_FAILED, e.message) from e
        if not updated:
            raise CollaboratorError(
                ErrorCode.UPDATE_FAILED,
                f"Lease factory refused term update for lease {lease_id}",
            )
        return new_term
