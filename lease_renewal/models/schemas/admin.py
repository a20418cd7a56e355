"""Pydantic schemas for oracle-gated policy administration."""

from pydantic import Field

from lease_renewal.models.schemas.lease import CamelModel


class OracleUpdate(CamelModel):
    oracle: str = Field(..., min_length=1)


class ThresholdUpdate(CamelModel):
    threshold: int


class PeriodUpdate(CamelModel):
    period: int


class GracePeriodUpdate(CamelModel):
    grace_period: int


class PolicyResponse(CamelModel):
    """Schema for the global renewal policy."""

    oracle_principal: str
    default_threshold: int
    default_period: int
    grace_period: int
    max_evaluations: int
    fallback_duration_extension: int
    fallback_min_payments: int


class ClockAdvanceRequest(CamelModel):
    blocks: int = Field(1, ge=0)


class BlockClockResponse(CamelModel):
    height: int
