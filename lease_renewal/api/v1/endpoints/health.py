"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from lease_renewal.deps import RenewalHost, get_host

router = APIRouter()


@router.get("/health")
def health_check(host: Annotated[RenewalHost, Depends(get_host)]) -> dict:
    """
    Health check endpoint.

    Returns:
        dict: API status with the current block height and evaluation count
    """
    return {
        "status": "healthy",
        "blockHeight": host.clock.height,
        "evaluations": host.engine.get_evaluation_count(),
    }
