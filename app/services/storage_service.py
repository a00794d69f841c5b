# app/services/storage_service.py
"""
Storage façade: the single interface routers, auth and seeding call.

Business rules (defaults, timestamps, driver→vehicle cascade, activity logging,
stats) are implemented here once and run on top of whichever backing was
selected at startup (app.storage.memory or app.storage.sql).

The façade trusts its caller: uniqueness and cross-entity references are checked
by app.services.integrity before create/update, not here.
"""

from datetime import datetime
from typing import Optional, Sequence, Tuple

from app.models import (
    Activity, Driver, Feedback, User, Vehicle,
    DriverId, FeedbackId, UserId, VehicleId,
)
from app.storage.base import StorageBackend
from app.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ISSUE_FEEDBACK_TYPES = ("complaint", "report")


class Storage:
    def __init__(self, backend: StorageBackend, issue_feedback_types: Sequence[str] = DEFAULT_ISSUE_FEEDBACK_TYPES):
        self.backend = backend
        self.issue_feedback_types = tuple(issue_feedback_types)

    # ── Users ─────────────────────────────────────────────────────────────
    def get_user(self, user_id: UserId) -> Optional[User]:
        return self.backend.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.backend.users.list() if u.username == username), None)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.backend.users.list() if u.email == email), None)

    def create_user(self, data: dict) -> User:
        user = self.backend.users.create({**data, "is_admin": data.get("is_admin") or None})
        logger.info(f"User created: {user.username} (id={user.id})")
        return user

    # ── Drivers ───────────────────────────────────────────────────────────
    def get_driver(self, driver_id: DriverId) -> Optional[Driver]:
        return self.backend.drivers.get(driver_id)

    def get_driver_by_license_number(self, license_number: str) -> Optional[Driver]:
        return next((d for d in self.backend.drivers.list() if d.license_number == license_number), None)

    def get_all_drivers(self) -> list[Driver]:
        return self.backend.drivers.list()

    def create_driver(self, data: dict) -> Driver:
        driver = self.backend.drivers.create({
            **data,
            "status": data.get("status") or "active",
            "notes": data.get("notes") or None,
            "created_at": datetime.utcnow(),
        })
        logger.info(f"Driver created: {driver.name} license={driver.license_number} (id={driver.id})")
        return driver

    def update_driver(self, driver_id: DriverId, data: dict) -> Optional[Driver]:
        return self.backend.drivers.update(driver_id, data)

    def delete_driver(self, driver_id: DriverId) -> bool:
        """
        Delete a driver and every vehicle they own.
        Vehicles go first and nothing is rolled back. A vehicle that reports
        not-deleted does not stop the cascade; an exception stops it and leaves
        the driver in place.
        """
        for vehicle in self.get_vehicles_by_driver_id(driver_id):
            self.delete_vehicle(vehicle.id)

        deleted = self.backend.drivers.delete(driver_id)
        if deleted:
            logger.info(f"Driver {driver_id} deleted")
        return deleted

    # ── Vehicles ──────────────────────────────────────────────────────────
    def get_vehicle(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        return self.backend.vehicles.get(vehicle_id)

    def get_vehicle_by_plate_number(self, plate_number: str) -> Optional[Vehicle]:
        plate = plate_number.lower()
        return next((v for v in self.backend.vehicles.list() if v.plate_number.lower() == plate), None)

    def get_all_vehicles(self) -> list[Vehicle]:
        return self.backend.vehicles.list()

    def get_vehicles_by_driver_id(self, driver_id: DriverId) -> list[Vehicle]:
        return [v for v in self.backend.vehicles.list() if v.driver_id == driver_id]

    def create_vehicle(self, data: dict) -> Vehicle:
        vehicle = self.backend.vehicles.create({
            **data,
            "status": data.get("status") or "active",
            "registration_date": datetime.utcnow(),
        })
        logger.info(f"Vehicle created: {vehicle.plate_number} driver={vehicle.driver_id} (id={vehicle.id})")

        # Fixture vehicles are inserted before the ledger has any entry
        if self.backend.activities.count() > 0:
            driver = self.get_driver(vehicle.driver_id)
            self.log_activity({
                "type": "vehicle_created",
                "title": "New vehicle registered",
                "description": f"{vehicle.type} ({vehicle.plate_number}) assigned to "
                               f"{driver.name if driver else 'Unknown Driver'}",
                "entity_type": "vehicle",
                "entity_id": vehicle.id,
            })
        return vehicle

    def update_vehicle(self, vehicle_id: VehicleId, data: dict) -> Optional[Vehicle]:
        return self.backend.vehicles.update(vehicle_id, data)

    def delete_vehicle(self, vehicle_id: VehicleId) -> bool:
        deleted = self.backend.vehicles.delete(vehicle_id)
        if deleted:
            logger.info(f"Vehicle {vehicle_id} deleted")
        return deleted

    # ── Feedback ──────────────────────────────────────────────────────────
    def get_feedback(self, feedback_id: FeedbackId) -> Optional[Feedback]:
        return self.backend.feedbacks.get(feedback_id)

    def get_all_feedbacks(self) -> list[Feedback]:
        return self.backend.feedbacks.list()

    def get_feedbacks_by_plate_number(self, plate_number: str) -> list[Feedback]:
        plate = plate_number.lower()
        return [f for f in self.backend.feedbacks.list() if f.plate_number.lower() == plate]

    def create_feedback(self, data: dict) -> Feedback:
        feedback = self.backend.feedbacks.create({
            **data,
            "passenger_email": data.get("passenger_email") or None,
            "created_at": datetime.utcnow(),
            "resolved": False,
        })
        logger.info(f"Feedback {feedback.id} ({feedback.feedback_type}) received for {feedback.plate_number}")
        return feedback

    def resolve_feedback(self, feedback_id: FeedbackId, resolved: bool) -> Optional[Feedback]:
        """Set the resolved flag. Logs a feedback_resolved activity on every call."""
        feedback = self.backend.feedbacks.get(feedback_id)
        if feedback is None:
            return None

        updated = self.backend.feedbacks.update(feedback_id, {"resolved": resolved})
        self.log_activity({
            "type": "feedback_resolved",
            "title": "Feedback resolved",
            "description": f"Feedback from {feedback.passenger_name} for vehicle {feedback.plate_number} "
                           f"marked as {'resolved' if resolved else 'unresolved'}",
            "entity_type": "feedback",
            "entity_id": feedback_id,
        })
        return updated

    # ── Activities ────────────────────────────────────────────────────────
    def get_recent_activities(self, limit: int = 10) -> list[Activity]:
        activities = sorted(self.backend.activities.list(), key=lambda a: (a.timestamp, a.id), reverse=True)
        return activities[:limit]

    def log_activity(self, entry: dict) -> Activity:
        activity = self.backend.activities.create({**entry, "timestamp": datetime.utcnow()})
        logger.debug(f"[ACTIVITY][{activity.type}] {activity.description}")
        return activity

    # ── Cross-entity queries ──────────────────────────────────────────────
    def get_vehicle_with_driver(self, plate_number: str) -> Optional[Tuple[Vehicle, Driver]]:
        """Vehicle and its owner for a plate, or None if either is missing."""
        vehicle = self.get_vehicle_by_plate_number(plate_number)
        if vehicle is None:
            return None

        driver = self.get_driver(vehicle.driver_id)
        if driver is None:
            logger.warning(f"Vehicle {vehicle.plate_number} references missing driver {vehicle.driver_id}")
            return None
        return vehicle, driver

    def count_stats(self) -> dict:
        issues = [
            f for f in self.backend.feedbacks.list()
            if not f.resolved and f.feedback_type in self.issue_feedback_types
        ]
        return {
            "drivers_count": self.backend.drivers.count(),
            "vehicles_count": self.backend.vehicles.count(),
            "feedbacks_count": self.backend.feedbacks.count(),
            "issues_count": len(issues),
        }

    def is_empty(self) -> bool:
        return self.backend.users.count() == 0


def build_storage(settings) -> Storage:
    """Select the backing named by settings.STORAGE_BACKEND and wrap it in the façade."""
    backend_name = settings.STORAGE_BACKEND.lower()
    if backend_name == "memory":
        from app.storage.memory import MemoryBackend
        backend = MemoryBackend()
    elif backend_name == "sql":
        from app.database import build_engine
        from app.storage.sql import SqlBackend
        backend = SqlBackend(build_engine(settings.DATABASE_URL))
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND '{settings.STORAGE_BACKEND}' (expected memory or sql)")

    logger.info(f"Storage backend: {backend.name}")
    return Storage(backend, issue_feedback_types=settings.ISSUE_FEEDBACK_TYPES)
