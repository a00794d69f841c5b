# app/storage/memory.py
"""
In-memory backing: one dict per entity plus a never-reused id counter.
Shared by all requests of the process without locking (last write wins).
"""

from itertools import count
from typing import Any, Optional

from app.models import User, Driver, Vehicle, Feedback, Activity
from app.storage.base import EntityStore, StorageBackend


class MemoryEntityStore(EntityStore):
    def __init__(self, model):
        super().__init__(model)
        self._rows: dict[int, Any] = {}
        self._ids = count(1)

    def create(self, fields: dict) -> Any:
        entity = self.model(**fields)
        entity.id = next(self._ids)
        self._rows[entity.id] = entity
        return entity

    def get(self, entity_id: int) -> Optional[Any]:
        return self._rows.get(entity_id)

    def list(self) -> list:
        return list(self._rows.values())

    def update(self, entity_id: int, fields: dict) -> Optional[Any]:
        entity = self._rows.get(entity_id)
        if entity is None:
            return None
        for key, value in fields.items():
            setattr(entity, key, value)
        return entity

    def delete(self, entity_id: int) -> bool:
        return self._rows.pop(entity_id, None) is not None

    def count(self) -> int:
        return len(self._rows)


class MemoryBackend(StorageBackend):
    name = "memory"

    def __init__(self):
        self.users = MemoryEntityStore(User)
        self.drivers = MemoryEntityStore(Driver)
        self.vehicles = MemoryEntityStore(Vehicle)
        self.feedbacks = MemoryEntityStore(Feedback)
        self.activities = MemoryEntityStore(Activity)

    def ping(self) -> None:
        return None
