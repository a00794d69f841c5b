# app/storage/sql.py
"""
Relational backing using the SQLAlchemy models in app.models.
Each store operation runs in its own short-lived session and commits immediately.
Returned rows are detached but fully loaded (expire_on_commit=False).
"""

from typing import Any, Optional

from sqlalchemy import func, text
from sqlalchemy.engine import Engine

from app.database import build_session_factory, create_tables
from app.models import User, Driver, Vehicle, Feedback, Activity
from app.storage.base import EntityStore, StorageBackend
from app.utils.logger import get_logger

logger = get_logger(__name__)


class SqlEntityStore(EntityStore):
    def __init__(self, model, session_factory):
        super().__init__(model)
        self._session_factory = session_factory

    def create(self, fields: dict) -> Any:
        with self._session_factory() as db:
            entity = self.model(**fields)
            db.add(entity)
            db.commit()
            return entity

    def get(self, entity_id: int) -> Optional[Any]:
        with self._session_factory() as db:
            return db.get(self.model, entity_id)

    def list(self) -> list:
        with self._session_factory() as db:
            return db.query(self.model).order_by(self.model.id).all()

    def update(self, entity_id: int, fields: dict) -> Optional[Any]:
        with self._session_factory() as db:
            entity = db.get(self.model, entity_id)
            if entity is None:
                return None
            for key, value in fields.items():
                setattr(entity, key, value)
            db.commit()
            return entity

    def delete(self, entity_id: int) -> bool:
        with self._session_factory() as db:
            entity = db.get(self.model, entity_id)
            if entity is None:
                return False
            db.delete(entity)
            db.commit()
            return True

    def count(self) -> int:
        with self._session_factory() as db:
            return db.query(func.count(self.model.id)).scalar() or 0


class SqlBackend(StorageBackend):
    name = "sql"

    def __init__(self, engine: Engine):
        self.engine = engine
        create_tables(engine)
        logger.info(f"SQL storage ready on {engine.url.render_as_string(hide_password=True)}")

        session_factory = build_session_factory(engine)
        self.users = SqlEntityStore(User, session_factory)
        self.drivers = SqlEntityStore(Driver, session_factory)
        self.vehicles = SqlEntityStore(Vehicle, session_factory)
        self.feedbacks = SqlEntityStore(Feedback, session_factory)
        self.activities = SqlEntityStore(Activity, session_factory)

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
