"""Global renewal policy owned by an engine instance."""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from lease_renewal.config import Settings
from lease_renewal.models.domain.lease import LeaseRules


@dataclass
class PolicyConfig:
    """
    Mutable global policy state.

    Only the access controller writes to this object after construction.

    Attributes:
        oracle_principal: Identity authorized for administrative actions
        default_threshold: Threshold used when a lease has no stored rules
        default_period: Period used when a lease has no stored rules
        grace_period: Ceiling for any lease's grace_days
        max_evaluations: Soft ceiling on expected evaluation volume
        fallback_duration_extension: Extension used by fallback rules
        fallback_min_payments: Minimum payments used by fallback rules
    """

    oracle_principal: str
    default_threshold: int = 90
    default_period: int = 12
    grace_period: int = 30
    max_evaluations: int = 500
    fallback_duration_extension: int = 12
    fallback_min_payments: int = 6

    @classmethod
    def from_settings(cls, settings: Settings) -> "PolicyConfig":
        """Build a fresh policy from application settings."""
        return cls(
            oracle_principal=settings.ORACLE_PRINCIPAL,
            default_threshold=settings.DEFAULT_THRESHOLD,
            default_period=settings.DEFAULT_PERIOD,
            grace_period=settings.GRACE_PERIOD,
            max_evaluations=settings.MAX_EVALUATIONS,
            fallback_duration_extension=settings.FALLBACK_DURATION_EXTENSION,
            fallback_min_payments=settings.FALLBACK_MIN_PAYMENTS,
        )

    def default_rules(self) -> LeaseRules:
        """Build the fallback rule tuple from the current defaults."""
        return LeaseRules(
            threshold=self.default_threshold,
            period=self.default_period,
            duration_extension=self.fallback_duration_extension,
            min_payments=self.fallback_min_payments,
            grace_days=self.grace_period,
        )

    def snapshot(self) -> Dict[str, Any]:
        return asdict(self)
