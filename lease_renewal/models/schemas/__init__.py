"""Pydantic schemas for request/response validation."""

from lease_renewal.models.schemas.admin import (
    BlockClockResponse,
    ClockAdvanceRequest,
    GracePeriodUpdate,
    OracleUpdate,
    PolicyResponse,
    PeriodUpdate,
    ThresholdUpdate,
)
from lease_renewal.models.schemas.lease import (
    LeaseRulesResponse,
    LeaseRulesUpdate,
    LeaseTermResponse,
    LeaseTermUpdate,
    PaymentHistoryResponse,
    PaymentRecordCreate,
)
from lease_renewal.models.schemas.renewal import (
    EvaluationCountResponse,
    EvaluationRecordResponse,
    ManualEvaluationResponse,
    RenewalResponse,
    RenewalStatusResponse,
)

__all__ = [
    # Admin schemas
    "BlockClockResponse",
    "ClockAdvanceRequest",
    "GracePeriodUpdate",
    "OracleUpdate",
    "PeriodUpdate",
    "PolicyResponse",
    "ThresholdUpdate",
    # Lease schemas
    "LeaseRulesResponse",
    "LeaseRulesUpdate",
    "LeaseTermResponse",
    "LeaseTermUpdate",
    "PaymentHistoryResponse",
    "PaymentRecordCreate",
    # Renewal schemas
    "EvaluationCountResponse",
    "EvaluationRecordResponse",
    "ManualEvaluationResponse",
    "RenewalResponse",
    "RenewalStatusResponse",
]
