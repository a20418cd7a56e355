"""Renewal endpoints for running and inspecting renewal decisions."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from lease_renewal.core.exceptions import RenewalError
from lease_renewal.deps import RenewalHost, get_caller, get_locked_host
from lease_renewal.models.schemas.renewal import (
    EvaluationCountResponse,
    EvaluationRecordResponse,
    ManualEvaluationResponse,
    RenewalResponse,
    RenewalStatusResponse,
)
from lease_renewal.api.v1.endpoints.errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/leases/{lease_id}/renewals",
    response_model=RenewalResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Check and renew a lease",
    description="Evaluate the payment history of a lease and extend its term if eligible",
)
def check_and_renew(
    lease_id: int,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> RenewalResponse:
    """
    Attempt an automatic renewal.

    This endpoint:
    1. Resolves the lease rules (stored or defaults)
    2. Checks the renewal state and eligibility window
    3. Evaluates the on-time ratio and payment count
    4. Extends the lease term and records an evaluation

    Every failure leaves the lease untouched and reports its error code.
    """
    try:
        new_term = host.engine.check_and_renew(lease_id)
        return RenewalResponse(lease_id=lease_id, new_term=new_term)

    except RenewalError as e:
        logger.debug(f"Renewal of lease {lease_id} rejected: {e.code.name}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Error renewing lease {lease_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to renew lease",
        )


@router.post(
    "/leases/{lease_id}/evaluations",
    response_model=ManualEvaluationResponse,
    summary="Run a manual evaluation",
    description="Oracle-triggered evaluation that renews the lease if it qualifies",
)
def manual_evaluation(
    lease_id: int,
    caller: Annotated[str, Depends(get_caller)],
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> ManualEvaluationResponse:
    """Run a manual evaluation. renewed=false means the evaluation ran but did not renew."""
    try:
        renewed = host.engine.manual_evaluation(caller, lease_id)
        return ManualEvaluationResponse(lease_id=lease_id, renewed=renewed)

    except RenewalError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Error evaluating lease {lease_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to evaluate lease",
        )


@router.get(
    "/leases/{lease_id}/status",
    response_model=RenewalStatusResponse,
    summary="Get renewal status",
)
def get_renewal_status(
    lease_id: int,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> RenewalStatusResponse:
    """Get the renewal status of a lease. Leases never renewed return 404."""
    renewal_status = host.engine.get_renewal_status(lease_id)
    if renewal_status is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No renewal status for lease {lease_id}",
        )
    return RenewalStatusResponse(
        lease_id=lease_id,
        state=host.engine.get_renewal_state(lease_id),
        **renewal_status.__dict__,
    )


@router.get(
    "/leases/{lease_id}/evaluations",
    response_model=list[EvaluationRecordResponse],
    summary="List evaluations for a lease",
)
def list_evaluations(
    lease_id: int,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> list[EvaluationRecordResponse]:
    return [
        EvaluationRecordResponse(**record.__dict__)
        for record in host.engine.list_evaluations(lease_id)
    ]


@router.get(
    "/leases/{lease_id}/evaluations/{evaluation_id}",
    response_model=EvaluationRecordResponse,
    summary="Get an evaluation record",
)
def get_evaluation(
    lease_id: int,
    evaluation_id: int,
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> EvaluationRecordResponse:
    record = host.engine.get_evaluation_history(lease_id, evaluation_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Evaluation {evaluation_id} not found for lease {lease_id}",
        )
    return EvaluationRecordResponse(**record.__dict__)


@router.get(
    "/evaluations/count",
    response_model=EvaluationCountResponse,
    summary="Get the evaluation count",
)
def get_evaluation_count(
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> EvaluationCountResponse:
    return EvaluationCountResponse(count=host.engine.get_evaluation_count())
