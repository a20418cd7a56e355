"""Exception hierarchy for renewal engine failures."""

from typing import Optional

from lease_renewal.core.enums import ErrorCode


class RenewalError(Exception):
    """
    Base class for every failure raised by the renewal engine.

    Each instance carries an ErrorCode so callers can branch on the
    specific kind rather than on the exception class or message.

    Attributes:
        code: The failure kind
        message: Human-readable explanation
    """

    def __init__(self, code: ErrorCode, message: Optional[str] = None):
        self.code = code
        self.message = message or code.name.replace("_", " ").capitalize()
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(code={self.code.value}, kind={self.code.name})>"


class AuthorizationError(RenewalError):
    """Caller is not the oracle principal."""


class RuleValidationError(RenewalError):
    """Malformed rule or parameter input, rejected before any state change."""


class RenewalStateError(RenewalError):
    """Renewal suspended or attempted outside the eligibility window."""


class ThresholdNotMetError(RenewalError):
    """Payment history does not satisfy the lease rules."""


class CalculationError(RenewalError):
    """On-time ratio could not be computed."""


class CollaboratorError(RenewalError):
    """Failure reported by the payment tracker or the lease factory."""
