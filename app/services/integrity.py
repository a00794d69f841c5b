# app/services/integrity.py
"""
Uniqueness and cross-entity reference checks.

The storage façade does not enforce these itself; callers run the relevant
check before create/update. Each check raises an IntegrityViolation subclass
whose message is safe to return to the client.
"""

from typing import Optional

from app.models import Driver, DriverId, VehicleId, Vehicle
from app.services.storage_service import Storage


class IntegrityViolation(Exception):
    """Base class for rejected writes. str(exc) is the client-facing message."""


class DuplicateLicenseNumber(IntegrityViolation):
    pass


class DuplicatePlateNumber(IntegrityViolation):
    pass


class UnknownDriver(IntegrityViolation):
    pass


class UnregisteredPlate(IntegrityViolation):
    pass


def ensure_license_available(storage: Storage, license_number: str, exclude_id: Optional[DriverId] = None):
    existing = storage.get_driver_by_license_number(license_number)
    if existing is not None and existing.id != exclude_id:
        raise DuplicateLicenseNumber("Driver with this license number already exists")


def ensure_plate_available(storage: Storage, plate_number: str, exclude_id: Optional[VehicleId] = None):
    existing = storage.get_vehicle_by_plate_number(plate_number)
    if existing is not None and existing.id != exclude_id:
        raise DuplicatePlateNumber("Vehicle with this plate number already exists")


def ensure_driver_exists(storage: Storage, driver_id: DriverId) -> Driver:
    driver = storage.get_driver(driver_id)
    if driver is None:
        raise UnknownDriver("Driver not found")
    return driver


def ensure_plate_registered(storage: Storage, plate_number: str) -> Vehicle:
    vehicle = storage.get_vehicle_by_plate_number(plate_number)
    if vehicle is None:
        raise UnregisteredPlate(
            f"This plate number ({plate_number}) does not belong to our park. Please verify the plate "
            f"number or contact park management if you believe this is an error."
        )
    return vehicle
