"""Shared fixtures for renewal engine tests."""
from decimal import Decimal
from typing import List

import pytest

from lease_renewal.models.domain.lease import LeaseRules, PaymentRecord
from lease_renewal.models.domain.policy import PolicyConfig
from lease_renewal.services.clock import BlockClock
from lease_renewal.services.collaborators import (
    InMemoryLeaseFactory,
    InMemoryPaymentTracker,
)
from lease_renewal.services.renewal_engine import RenewalEngine

ORACLE = "ST1TEST"
STRANGER = "ST2FAKE"


def make_payments(on_time: int = 0, late: int = 0) -> List[PaymentRecord]:
    """Build a history with the given numbers of on-time and late payments."""
    records = [
        PaymentRecord(amount=Decimal("100"), timestamp=i, on_time=True)
        for i in range(on_time)
    ]
    records += [
        PaymentRecord(amount=Decimal("100"), timestamp=on_time + i, on_time=False)
        for i in range(late)
    ]
    return records


@pytest.fixture
def policy():
    return PolicyConfig(
        oracle_principal=ORACLE,
        default_threshold=90,
        default_period=12,
        grace_period=30,
        max_evaluations=500,
    )


@pytest.fixture
def clock():
    return BlockClock(100)


@pytest.fixture
def payment_tracker():
    return InMemoryPaymentTracker()


@pytest.fixture
def lease_factory():
    return InMemoryLeaseFactory()


@pytest.fixture
def engine(payment_tracker, lease_factory, policy, clock):
    return RenewalEngine(
        payment_tracker=payment_tracker,
        lease_factory=lease_factory,
        policy=policy,
        clock=clock,
    )


@pytest.fixture
def sample_rules():
    return LeaseRules(
        threshold=85,
        period=10,
        duration_extension=12,
        min_payments=5,
        grace_days=20,
    )


@pytest.fixture
def payments():
    """Factory fixture: payments(on_time=..., late=...)."""
    return make_payments
