"""Dependency injection for FastAPI endpoints."""

import asyncio
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Header

from lease_renewal.config import settings
from lease_renewal.models.domain.policy import PolicyConfig
from lease_renewal.services.clock import BlockClock
from lease_renewal.services.collaborators import (
    InMemoryLeaseFactory,
    InMemoryPaymentTracker,
)
from lease_renewal.services.renewal_engine import RenewalEngine


@dataclass
class RenewalHost:
    """
    Execution host for one renewal engine.

    Owns the block clock and the in-process collaborators, and serializes
    every request against the engine with a single lock.
    """

    payment_tracker: InMemoryPaymentTracker
    lease_factory: InMemoryLeaseFactory
    clock: BlockClock
    engine: RenewalEngine
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @classmethod
    def create(
        cls,
        policy: Optional[PolicyConfig] = None,
        height: Optional[int] = None,
    ) -> "RenewalHost":
        """
        Build a host with fresh in-process collaborators.

        Args:
            policy: Global policy (built from settings if omitted)
            height: Starting block height (INITIAL_BLOCK_HEIGHT if omitted)
        """
        payment_tracker = InMemoryPaymentTracker()
        lease_factory = InMemoryLeaseFactory()
        clock = BlockClock(settings.INITIAL_BLOCK_HEIGHT if height is None else height)
        engine = RenewalEngine(
            payment_tracker=payment_tracker,
            lease_factory=lease_factory,
            policy=policy or PolicyConfig.from_settings(settings),
            clock=clock,
        )
        return cls(payment_tracker, lease_factory, clock, engine)


@lru_cache
def get_host() -> RenewalHost:
    """Return the process-wide renewal host."""
    return RenewalHost.create()


async def get_locked_host(
    host: Annotated[RenewalHost, Depends(get_host)],
) -> AsyncGenerator[RenewalHost, None]:
    """
    Hold the host lock for the duration of a request.

    The lock is awaited on the event loop, so queued requests do not
    occupy worker threads needed by the handler holding it.

    Yields:
        RenewalHost: The host, exclusively owned by the current request
    """
    async with host.lock:
        yield host


def get_caller(x_caller: Annotated[str, Header()] = "") -> str:
    """Principal issuing the request, from the X-Caller header."""
    return x_caller
