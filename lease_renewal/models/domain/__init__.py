"""Domain models for the application."""

from lease_renewal.models.domain.lease import LeaseRules, PaymentRecord
from lease_renewal.models.domain.policy import PolicyConfig
from lease_renewal.models.domain.renewal import EvaluationRecord, RenewalStatus

__all__ = [
    "LeaseRules",
    "PaymentRecord",
    "PolicyConfig",
    "RenewalStatus",
    "EvaluationRecord",
]
