"""Renewal status and evaluation audit models."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RenewalStatus:
    """
    Renewal bookkeeping for one lease.

    Attributes:
        last_renewed: Block height of the last successful renewal (0 if never)
        next_eligible: Block height before which renewal attempts are rejected
        active: False while renewal is suspended; blocks every attempt
        extensions: Number of successful renewals
    """

    last_renewed: int = 0
    next_eligible: int = 0
    active: bool = True
    extensions: int = 0

    def advanced(self, now: int, period: int) -> "RenewalStatus":
        """Return the status that follows a successful renewal at ``now``."""
        return replace(
            self,
            last_renewed=now,
            next_eligible=now + period,
            active=True,
            extensions=self.extensions + 1,
        )


@dataclass(frozen=True)
class EvaluationRecord:
    """Write-once audit record of a renewal decision."""

    lease_id: int
    evaluation_id: int
    timestamp: int
    met_threshold: bool
    on_time_count: int
    total_count: int
    ratio: int
