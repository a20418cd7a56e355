"""Append-only repository for evaluation audit records."""

import logging
from typing import List, Optional, Tuple

from lease_renewal.models.domain.renewal import EvaluationRecord
from lease_renewal.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class EvaluationRepository(BaseRepository[Tuple[int, int], EvaluationRecord]):
    """
    Evaluation ledger keyed by (lease_id, evaluation_id).

    Owns the evaluation id counter, which starts at 0 and only ever
    increases. Records are write-once: saving under an existing key
    raises instead of overwriting.
    """

    def __init__(self, max_evaluations: int = 500):
        """
        Initialize the ledger.

        Args:
            max_evaluations: Soft ceiling on expected volume; exceeding it
                is logged, not refused
        """
        super().__init__()
        self.max_evaluations = max_evaluations
        self.next_evaluation_id = 0

    def save(self, id: Tuple[int, int], record: EvaluationRecord) -> EvaluationRecord:
        if id in self._records:
            raise ValueError(f"Evaluation {id} already recorded")
        return super().save(id, record)

    def append(
        self,
        lease_id: int,
        timestamp: int,
        met_threshold: bool,
        on_time_count: int,
        total_count: int,
        ratio: int,
    ) -> EvaluationRecord:
        """
        Append a record under the next evaluation id and advance the counter.

        Args:
            lease_id: Lease the evaluation belongs to
            timestamp: Block height of the evaluation
            met_threshold: Whether the lease met its threshold
            on_time_count: On-time payments in the evaluated history
            total_count: Payments in the evaluated history
            ratio: On-time ratio in percent

        Returns:
            The stored record
        """
        record = EvaluationRecord(
            lease_id=lease_id,
            evaluation_id=self.next_evaluation_id,
            timestamp=timestamp,
            met_threshold=met_threshold,
            on_time_count=on_time_count,
            total_count=total_count,
            ratio=ratio,
        )
        self.save((lease_id, record.evaluation_id), record)
        self.next_evaluation_id += 1

        if self.next_evaluation_id > self.max_evaluations:
            logger.warning(
                f"Evaluation count {self.next_evaluation_id} exceeds the expected "
                f"maximum of {self.max_evaluations}"
            )
        return record

    def get(self, lease_id: int, evaluation_id: int) -> Optional[EvaluationRecord]:
        return self.get_by_id((lease_id, evaluation_id))

    def find_by_lease(self, lease_id: int) -> List[EvaluationRecord]:
        """Return a lease's records ordered by evaluation id."""
        records = [r for (lid, _), r in self._records.items() if lid == lease_id]
        return sorted(records, key=lambda r: r.evaluation_id)
