"""
Generic identity-keyed repository over one stored collection.
"""

from typing import Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import ValidationError

from .store import KeyValueStore, StoreResult
from ...core.enums import Collection
from ...core.exceptions import StorageWriteError
from ...core.models.base import Entity
from ...utils.logging import get_logger

logger = get_logger("shifa.repository")

T = TypeVar("T", bound=Entity)


def ensure_written(result: StoreResult, what: str) -> None:
    """Raise StorageWriteError if a write was dropped."""
    if not result.ok:
        raise StorageWriteError(f"Could not save {what}: {result.error}")


class Repository(Generic[T]):
    """
    CRUD over a collection of entities keyed by ``id``.

    Every mutation reads the whole collection, changes it, and writes it
    back, so it is only safe with a single writer.
    """

    collection: Collection
    model: Type[T]

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _load(self) -> List[T]:
        items: List[T] = []
        for record in self.store.get(self.collection):
            try:
                items.append(self.model.model_validate(record))
            except ValidationError as e:
                logger.warning(
                    f"skipping invalid {self.collection.value} record "
                    f"{record.get('id') if isinstance(record, dict) else record!r}: "
                    f"{e.error_count()} error(s)"
                )
        return items

    def _save(self, items: Sequence[T]) -> StoreResult:
        return self.store.set(self.collection, [item.to_record() for item in items])

    def get_all(self) -> List[T]:
        """Get every entity in storage order."""
        return self._load()

    def add(self, item: T) -> StoreResult:
        """Insert the entity, or replace the one with the same id in place."""
        items = self._load()
        for index, existing in enumerate(items):
            if existing.id == item.id:
                items[index] = item
                break
        else:
            items.append(item)
        return self._save(items)

    def remove(self, item_id: str) -> StoreResult:
        """Remove the entity with this id; absent ids are a no-op."""
        items = self._load()
        kept = [item for item in items if item.id != item_id]
        if len(kept) == len(items):
            return StoreResult.success()
        return self._save(kept)

    def find(self, item_id: str) -> Optional[T]:
        """Get the first entity with this id, or None."""
        for item in self._load():
            if item.id == item_id:
                return item
        return None

    def count(self) -> int:
        return len(self._load())

    def has_records(self) -> bool:
        """Check for stored records, counting ones that fail validation."""
        return len(self.store.get(self.collection)) > 0

    def replace_all(self, items: Sequence[T]) -> StoreResult:
        """Overwrite the collection with the given entities."""
        return self._save(items)
