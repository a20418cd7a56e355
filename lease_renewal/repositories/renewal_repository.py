"""Repository for per-lease renewal status."""

from lease_renewal.models.domain.renewal import RenewalStatus
from lease_renewal.repositories.base import BaseRepository


class RenewalStatusRepository(BaseRepository[int, RenewalStatus]):
    """
    Stores renewal status keyed by lease id.

    The engine only writes here after a successful renewal. Hosts may also
    save a status directly, e.g. to suspend a lease or to reactivate it.
    """
