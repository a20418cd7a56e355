"""Lease rule, payment, and term endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from lease_renewal.core.exceptions import RenewalError
from lease_renewal.deps import RenewalHost, get_locked_host
from lease_renewal.models.domain.lease import LeaseRules, PaymentRecord
from lease_renewal.models.schemas.lease import (
    LeaseRulesResponse,
    LeaseRulesUpdate,
    LeaseTermResponse,
    LeaseTermUpdate,
    PaymentHistoryResponse,
    PaymentRecordCreate,
)
from lease_renewal.api.v1.endpoints.errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()


@router.put(
    "/{lease_id}/rules",
    response_model=LeaseRulesResponse,
    summary="Set lease rules",
    description="Validate and store the renewal rules of a lease",
)
def set_lease_rules(
    lease_id: int,
    rules_data: LeaseRulesUpdate,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> LeaseRulesResponse:
    """
    Set the renewal rules of a lease, replacing any previous rules.

    Validation order:
    - lease id must be positive
    - threshold must be in (0, 100]
    - period must be positive
    - minimum payments must be positive
    - grace days must not exceed the global grace period
    """
    try:
        rules = host.engine.set_lease_rules(
            lease_id,
            LeaseRules(
                threshold=rules_data.threshold,
                period=rules_data.period,
                duration_extension=rules_data.duration_extension,
                min_payments=rules_data.min_payments,
                grace_days=rules_data.grace_days,
            ),
        )
        return LeaseRulesResponse(lease_id=lease_id, **rules.__dict__)

    except RenewalError as e:
        logger.debug(f"Rejected rules for lease {lease_id}: {e.code.name}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Error setting rules for lease {lease_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to set lease rules",
        )


@router.get(
    "/{lease_id}/rules",
    response_model=LeaseRulesResponse,
    summary="Get lease rules",
    description="Retrieve the stored renewal rules of a lease",
)
def get_lease_rules(
    lease_id: int,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> LeaseRulesResponse:
    """Get the stored rules of a lease. Leases on default rules return 404."""
    rules = host.engine.get_lease_rules(lease_id)
    if rules is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No rules stored for lease {lease_id}",
        )
    return LeaseRulesResponse(lease_id=lease_id, **rules.__dict__)


@router.post(
    "/{lease_id}/payments",
    response_model=PaymentHistoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record payments",
    description="Append payments to the in-process payment tracker",
)
def record_payments(
    lease_id: int,
    payments: list[PaymentRecordCreate],
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> PaymentHistoryResponse:
    """Record payments for a lease and return its full history."""
    host.payment_tracker.record_payments(
        lease_id,
        [
            PaymentRecord(amount=p.amount, timestamp=p.timestamp, on_time=p.on_time)
            for p in payments
        ],
    )
    return _history_response(lease_id, host)


@router.get(
    "/{lease_id}/payments",
    response_model=PaymentHistoryResponse,
    summary="Get payment history",
)
def get_payments(
    lease_id: int,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> PaymentHistoryResponse:
    """Get the payment history of a lease."""
    try:
        return _history_response(lease_id, host)
    except RenewalError as e:
        raise to_http_exception(e)


@router.put(
    "/{lease_id}/term",
    response_model=LeaseTermResponse,
    summary="Set lease term",
    description="Set the term held by the in-process lease factory",
)
def set_term(
    lease_id: int,
    term_data: LeaseTermUpdate,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> LeaseTermResponse:
    host.lease_factory.update_term(lease_id, term_data.term)
    return LeaseTermResponse(lease_id=lease_id, term=term_data.term)


@router.get(
    "/{lease_id}/term",
    response_model=LeaseTermResponse,
    summary="Get lease term",
)
def get_term(
    lease_id: int,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> LeaseTermResponse:
    try:
        term = host.lease_factory.get_term(lease_id)
    except RenewalError as e:
        raise to_http_exception(e)
    return LeaseTermResponse(lease_id=lease_id, term=term)


def _history_response(lease_id: int, host: RenewalHost) -> PaymentHistoryResponse:
    history = host.payment_tracker.get_history(lease_id)
    return PaymentHistoryResponse(
        lease_id=lease_id,
        payments=[
            PaymentRecordCreate(amount=p.amount, timestamp=p.timestamp, on_time=p.on_time)
            for p in history
        ],
    )
