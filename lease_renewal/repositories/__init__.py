from .base import BaseRepository
from .evaluation_repository import EvaluationRepository
from .renewal_repository import RenewalStatusRepository
from .rule_repository import LeaseRuleRepository

__all__ = [
    "BaseRepository",
    "EvaluationRepository",
    "LeaseRuleRepository",
    "RenewalStatusRepository",
]
