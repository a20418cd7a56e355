"""Pydantic schemas for lease rules, payments, and terms."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ==================== Lease Rule Schemas ====================


class LeaseRulesBase(CamelModel):
    """Base schema for lease rules.

    Ranges are enforced by the rule store so each violation maps to its
    own error code.
    """

    threshold: int = Field(..., description="Minimum on-time ratio in percent (1-100)")
    period: int = Field(..., description="Lookback window in payment-count units")
    duration_extension: int = Field(..., description="Term units added on renewal")
    min_payments: int = Field(..., description="Minimum number of recorded payments")
    grace_days: int = Field(..., description="Grace days, bounded by the global ceiling")


class LeaseRulesUpdate(LeaseRulesBase):
    """Schema for setting the rules of a lease."""

    pass


class LeaseRulesResponse(LeaseRulesBase):
    """Schema for lease rules response."""

    lease_id: int


# ==================== Payment Schemas ====================


class PaymentRecordCreate(CamelModel):
    """Schema for recording a payment with the in-process payment tracker."""

    amount: Decimal = Field(..., ge=0)
    timestamp: int = Field(..., ge=0)
    on_time: bool


class PaymentHistoryResponse(CamelModel):
    """Schema for a lease's payment history."""

    lease_id: int
    payments: list[PaymentRecordCreate] = []


# ==================== Term Schemas ====================


class LeaseTermUpdate(CamelModel):
    """Schema for setting a lease term with the in-process lease factory."""

    term: int = Field(..., ge=0)


class LeaseTermResponse(CamelModel):
    """Schema for lease term response."""

    lease_id: int
    term: int
