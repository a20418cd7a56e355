"""Per-lease rule storage with write-time validation."""

import logging
from typing import Optional

from lease_renewal.core.enums import ErrorCode
from lease_renewal.core.exceptions import RuleValidationError
from lease_renewal.models.domain.lease import LeaseRules
from lease_renewal.models.domain.policy import PolicyConfig
from lease_renewal.repositories.rule_repository import LeaseRuleRepository

logger = logging.getLogger(__name__)


def validate_lease_id(lease_id: int) -> None:
    """
    Reject non-positive lease ids.

    Raises:
        RuleValidationError: INVALID_LEASE_ID
    """
    if lease_id <= 0:
        raise RuleValidationError(
            ErrorCode.INVALID_LEASE_ID,
            f"Lease id must be positive, got {lease_id}",
        )


class LeaseRuleStore:
    """
    Holds per-lease renewal rules and resolves the default fallback.

    Rules are validated once, when written. Reads trust stored rules.
    """

    def __init__(self, policy: PolicyConfig, repo: Optional[LeaseRuleRepository] = None):
        """
        Initialize the rule store.

        Args:
            policy: Global policy providing the grace ceiling and defaults
            repo: Backing repository (a fresh one if omitted)
        """
        self.policy = policy
        self.repo = repo or LeaseRuleRepository()

    def set_lease_rules(self, lease_id: int, rules: LeaseRules) -> LeaseRules:
        """
        Validate and store the rules of a lease, replacing any previous rules.

        Checks run in a fixed order and the first failure wins.

        Args:
            lease_id: Lease the rules apply to
            rules: Candidate rules

        Returns:
            The stored rules

        Raises:
            RuleValidationError: INVALID_LEASE_ID, INVALID_THRESHOLD,
                INVALID_PERIOD, MIN_PAYMENTS_NOT_MET or GRACE_PERIOD_EXCEEDED
        """
        validate_lease_id(lease_id)
        if rules.threshold > 100 or rules.threshold <= 0:
            raise RuleValidationError(
                ErrorCode.INVALID_THRESHOLD,
                f"Threshold must be in (0, 100], got {rules.threshold}",
            )
        if rules.period <= 0:
            raise RuleValidationError(
                ErrorCode.INVALID_PERIOD,
                f"Period must be positive, got {rules.period}",
            )
        if rules.min_payments <= 0:
            raise RuleValidationError(
                ErrorCode.MIN_PAYMENTS_NOT_MET,
                f"Minimum payments must be positive, got {rules.min_payments}",
            )
        if rules.grace_days > self.policy.grace_period:
            raise RuleValidationError(
                ErrorCode.GRACE_PERIOD_EXCEEDED,
                f"Grace days {rules.grace_days} exceed the ceiling of "
                f"{self.policy.grace_period}",
            )

        self.repo.save(lease_id, rules)
        logger.info(f"Stored renewal rules for lease {lease_id}: {rules}")
        return rules

    def get_lease_rules(self, lease_id: int) -> Optional[LeaseRules]:
        """Return the stored rules of a lease, or None."""
        return self.repo.get_by_id(lease_id)

    def resolve_rules(self, lease_id: int) -> LeaseRules:
        """
        Return the stored rules, or fallback rules built from current defaults.

        The fallback is computed on every call and never stored.
        """
        rules = self.repo.get_by_id(lease_id)
        if rules is None:
            return self.policy.default_rules()
        return rules
