"""Repository for per-lease renewal rules."""

from lease_renewal.models.domain.lease import LeaseRules
from lease_renewal.repositories.base import BaseRepository


class LeaseRuleRepository(BaseRepository[int, LeaseRules]):
    """Stores validated lease rules keyed by lease id (last write wins)."""
