# app/storage/base.py
"""
Entity store contract shared by every storage backing.

A store holds instances of one model class keyed by id and nothing else:
defaults, cross-entity rules and activity logging belong to the façade in
app.services.storage_service. "Not found" is reported as None / False.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class EntityStore(ABC):
    """CRUD over a single entity type."""

    def __init__(self, model):
        self.model = model

    @abstractmethod
    def create(self, fields: dict) -> Any:
        """Persist a new entity built from fields and return it with its id assigned."""

    @abstractmethod
    def get(self, entity_id: int) -> Optional[Any]:
        ...

    @abstractmethod
    def list(self) -> list:
        """All entities in insertion (id) order."""

    @abstractmethod
    def update(self, entity_id: int, fields: dict) -> Optional[Any]:
        """Shallow merge of fields into the stored entity. None if it does not exist."""

    @abstractmethod
    def delete(self, entity_id: int) -> bool:
        ...

    @abstractmethod
    def count(self) -> int:
        ...


class StorageBackend(ABC):
    """Groups the five entity stores behind one selectable backing."""

    name: str = "abstract"

    users: EntityStore
    drivers: EntityStore
    vehicles: EntityStore
    feedbacks: EntityStore
    activities: EntityStore

    @abstractmethod
    def ping(self) -> None:
        """Raise if the backing is unreachable."""
