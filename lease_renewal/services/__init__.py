"""Service layer for renewal business logic."""

from lease_renewal.services.access_control import AccessController
from lease_renewal.services.clock import BlockClock
from lease_renewal.services.renewal_engine import RenewalEngine
from lease_renewal.services.rule_store import LeaseRuleStore
from lease_renewal.services.state_tracker import RenewalStateTracker

__all__ = [
    "AccessController",
    "BlockClock",
    "LeaseRuleStore",
    "RenewalEngine",
    "RenewalStateTracker",
]
