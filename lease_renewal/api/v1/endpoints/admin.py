"""Oracle-gated policy administration endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from lease_renewal.core.exceptions import RenewalError
from lease_renewal.deps import RenewalHost, get_caller, get_locked_host
from lease_renewal.models.schemas.admin import (
    BlockClockResponse,
    ClockAdvanceRequest,
    GracePeriodUpdate,
    OracleUpdate,
    PeriodUpdate,
    PolicyResponse,
    ThresholdUpdate,
)
from lease_renewal.api.v1.endpoints.errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/policy",
    response_model=PolicyResponse,
    summary="Get the global renewal policy",
)
def get_policy(
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> PolicyResponse:
    return PolicyResponse(**host.engine.get_policy())


@router.put(
    "/oracle",
    response_model=PolicyResponse,
    summary="Change the oracle principal",
)
def set_oracle(
    update: OracleUpdate,
    caller: Annotated[str, Depends(get_caller)],
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> PolicyResponse:
    try:
        host.engine.set_oracle(caller, update.oracle)
    except RenewalError as e:
        logger.warning(f"Rejected oracle change by {caller!r}: {e.code.name}")
        raise to_http_exception(e)
    return PolicyResponse(**host.engine.get_policy())


@router.put(
    "/default-threshold",
    response_model=PolicyResponse,
    summary="Set the default threshold",
)
def set_default_threshold(
    update: ThresholdUpdate,
    caller: Annotated[str, Depends(get_caller)],
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> PolicyResponse:
    try:
        host.engine.set_default_threshold(caller, update.threshold)
    except RenewalError as e:
        raise to_http_exception(e)
    return PolicyResponse(**host.engine.get_policy())


@router.put(
    "/default-period",
    response_model=PolicyResponse,
    summary="Set the default period",
)
def set_default_period(
    update: PeriodUpdate,
    caller: Annotated[str, Depends(get_caller)],
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> PolicyResponse:
    try:
        host.engine.set_default_period(caller, update.period)
    except RenewalError as e:
        raise to_http_exception(e)
    return PolicyResponse(**host.engine.get_policy())


@router.put(
    "/grace-period",
    response_model=PolicyResponse,
    summary="Set the grace period ceiling",
)
def set_grace_period(
    update: GracePeriodUpdate,
    caller: Annotated[str, Depends(get_caller)],
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> PolicyResponse:
    try:
        host.engine.set_grace_period(caller, update.grace_period)
    except RenewalError as e:
        raise to_http_exception(e)
    return PolicyResponse(**host.engine.get_policy())


@router.get(
    "/clock",
    response_model=BlockClockResponse,
    summary="Get the block height",
)
def get_clock(
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> BlockClockResponse:
    return BlockClockResponse(height=host.clock.height)


@router.post(
    "/clock/advance",
    response_model=BlockClockResponse,
    summary="Advance the block clock",
    description="Host operation; restricted to the oracle in this process",
)
def advance_clock(
    request: ClockAdvanceRequest,
    caller: Annotated[str, Depends(get_caller)],
    host: Annotated[RenewalHost, Depends(get_locked_host)],
) -> BlockClockResponse:
    try:
        host.engine.access.require_oracle(caller)
    except RenewalError as e:
        raise to_http_exception(e)
    return BlockClockResponse(height=host.clock.advance(request.blocks))
