"""Oracle-gated administrative controls over the global renewal policy."""

import logging

from lease_renewal.core.enums import ErrorCode
from lease_renewal.core.exceptions import AuthorizationError, RuleValidationError
from lease_renewal.models.domain.policy import PolicyConfig

logger = logging.getLogger(__name__)


class AccessController:
    """
    Gatekeeper for policy mutations.

    Every setter checks the caller against the oracle principal before
    validating its argument, and only writes once both checks pass.
    """

    def __init__(self, policy: PolicyConfig):
        """
        Initialize the access controller.

        Args:
            policy: The policy object this controller guards
        """
        self.policy = policy

    def is_authorized(self, caller: str) -> bool:
        """Return True iff the caller is the current oracle principal."""
        return caller == self.policy.oracle_principal

    def require_oracle(self, caller: str) -> None:
        """
        Ensure the caller is the oracle.

        Raises:
            AuthorizationError: ORACLE_NOT_VERIFIED if the caller is not the oracle
        """
        if not self.is_authorized(caller):
            raise AuthorizationError(
                ErrorCode.ORACLE_NOT_VERIFIED,
                f"Caller {caller!r} is not the oracle",
            )

    def set_oracle(self, caller: str, new_oracle: str) -> None:
        """
        Hand the oracle role to another principal.

        Args:
            caller: Principal issuing the change
            new_oracle: Principal that becomes the oracle

        Raises:
            AuthorizationError: NOT_AUTHORIZED if the caller is not the oracle
        """
        if not self.is_authorized(caller):
            raise AuthorizationError(
                ErrorCode.NOT_AUTHORIZED,
                f"Caller {caller!r} may not change the oracle",
            )
        self.policy.oracle_principal = new_oracle
        logger.info(f"Oracle changed from {caller!r} to {new_oracle!r}")

    def set_default_threshold(self, caller: str, threshold: int) -> None:
        """
        Set the threshold used by leases without stored rules.

        Raises:
            AuthorizationError: ORACLE_NOT_VERIFIED if the caller is not the oracle
            RuleValidationError: INVALID_THRESHOLD if threshold is outside (0, 100]
        """
        self.require_oracle(caller)
        if threshold > 100 or threshold <= 0:
            raise RuleValidationError(
                ErrorCode.INVALID_THRESHOLD,
                f"Threshold must be in (0, 100], got {threshold}",
            )
        self.policy.default_threshold = threshold
        logger.info(f"Default threshold set to {threshold}")

    def set_default_period(self, caller: str, period: int) -> None:
        """
        Set the period used by leases without stored rules.

        Raises:
            AuthorizationError: ORACLE_NOT_VERIFIED if the caller is not the oracle
            RuleValidationError: INVALID_PERIOD if period is not positive
        """
        self.require_oracle(caller)
        if period <= 0:
            raise RuleValidationError(
                ErrorCode.INVALID_PERIOD,
                f"Period must be positive, got {period}",
            )
        self.policy.default_period = period
        logger.info(f"Default period set to {period}")

    def set_grace_period(self, caller: str, grace_period: int) -> None:
        """
        Set the grace period ceiling. Any value is accepted.

        Raises:
            AuthorizationError: ORACLE_NOT_VERIFIED if the caller is not the oracle
        """
        self.require_oracle(caller)
        self.policy.grace_period = grace_period
        logger.info(f"Grace period ceiling set to {grace_period}")
