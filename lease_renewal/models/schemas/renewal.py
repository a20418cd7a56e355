"""Pydantic schemas for renewal results, status, and evaluations."""

from lease_renewal.core.enums import RenewalState
from lease_renewal.models.schemas.lease import CamelModel


class RenewalResponse(CamelModel):
    """Schema for a successful renewal."""

    lease_id: int
    new_term: int


class ManualEvaluationResponse(CamelModel):
    """Schema for a manual evaluation; renewed is False when the lease did not renew."""

    lease_id: int
    renewed: bool


class RenewalStatusResponse(CamelModel):
    """Schema for renewal status response."""

    lease_id: int
    state: RenewalState
    last_renewed: int
    next_eligible: int
    active: bool
    extensions: int


class EvaluationRecordResponse(CamelModel):
    """Schema for an evaluation audit record."""

    lease_id: int
    evaluation_id: int
    timestamp: int
    met_threshold: bool
    on_time_count: int
    total_count: int
    ratio: int


class EvaluationCountResponse(CamelModel):
    """Schema for the evaluation counter."""

    count: int
