from typing import Dict, Generic, Hashable, Optional, TypeVar

# Type variables for the stored record and its key
ModelType = TypeVar("ModelType")
KeyType = TypeVar("KeyType", bound=Hashable)


class BaseRepository(Generic[KeyType, ModelType]):
    """
    Generic in-memory repository providing keyed storage operations.

    Records are immutable values; a write replaces the whole record, so
    readers never observe a partially applied update.

    Type Parameters:
        KeyType: The key records are stored under
        ModelType: The record type this repository manages
    """

    def __init__(self):
        """Initialize an empty repository."""
        self._records: Dict[KeyType, ModelType] = {}

    def get_by_id(self, id: KeyType) -> Optional[ModelType]:
        """
        Retrieve a record by its key.

        Args:
            id: The record key

        Returns:
            The record if found, None otherwise
        """
        return self._records.get(id)

    def save(self, id: KeyType, record: ModelType) -> ModelType:
        """
        Insert or replace the record stored under a key.

        Args:
            id: The record key
            record: The new record value

        Returns:
            The stored record
        """
        self._records[id] = record
        return record

    def count(self) -> int:
        """Count stored records."""
        return len(self._records)
