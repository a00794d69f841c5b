# app/services/seed_service.py
"""
Fixture data loaded into an empty store at startup (and by scripts/setup/init_db.py).
Creates the default admin, sample drivers, their vehicles, and passenger feedback.
"""

from app.services.auth_service import hash_password
from app.services.storage_service import Storage
from app.utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_DRIVERS = [
    {"name": "Adebayo Johnson", "phone_number": "+234 803 456 7890", "license_number": "LIC-23456789",
     "status": "active", "notes": "Experienced driver with excellent record"},
    {"name": "Chioma Okafor", "phone_number": "+234 802 123 4567", "license_number": "LIC-87654321",
     "status": "suspended", "notes": "Suspended due to multiple complaints"},
    {"name": "Ibrahim Musa", "phone_number": "+234 905 678 9012", "license_number": "LIC-54321678",
     "status": "active", "notes": "New driver, joined recently"},
    {"name": "Fatima Abdullahi", "phone_number": "+234 706 234 5678", "license_number": "LIC-98765432",
     "status": "active", "notes": "Professional taxi driver with 8 years experience"},
    {"name": "Emeka Nwosu", "phone_number": "+234 813 987 6543", "license_number": "LIC-45678912",
     "status": "active", "notes": "Commercial bus driver specializing in interstate routes"},
    {"name": "Aisha Mohammed", "phone_number": "+234 701 456 7890", "license_number": "LIC-78912345",
     "status": "inactive", "notes": "On medical leave, expected to return next month"},
    {"name": "Olumide Adeyemi", "phone_number": "+234 802 345 6789", "license_number": "LIC-56789123",
     "status": "active", "notes": "Tricycle operator with clean driving record"},
    {"name": "Blessing Okoro", "phone_number": "+234 809 876 5432", "license_number": "LIC-34567891",
     "status": "active", "notes": "Recently certified driver, eager to work"},
]

# (plate, type, index into SAMPLE_DRIVERS)
SAMPLE_VEHICLES = [
    ("LAS-432KJ", "Toyota Hiace Bus", 0),
    ("ABJ-223KL", "Honda Accord Sedan", 1),
    ("LAS-876JK", "Toyota Camry Sedan", 2),
]

SAMPLE_FEEDBACKS = [
    {"passenger_name": "John Doe", "passenger_email": "john@example.com", "plate_number": "LAS-432KJ",
     "rating": 4, "feedback_type": "compliment",
     "message": "The driver was very professional and courteous. Clean vehicle and safe driving."},
    {"passenger_name": "Jane Smith", "passenger_email": "jane@example.com", "plate_number": "ABJ-223KL",
     "rating": 2, "feedback_type": "complaint",
     "message": "The driver was rude and drove recklessly. Vehicle was not clean."},
    {"passenger_name": "Grace Adebayo", "passenger_email": "grace@example.com", "plate_number": "LAS-876JK",
     "rating": 3, "feedback_type": "suggestion",
     "message": "Good service overall, but could improve on vehicle maintenance."},
    {"passenger_name": "David Okonkwo", "passenger_email": "david@example.com", "plate_number": "LAS-432KJ",
     "rating": 3, "feedback_type": "suggestion",
     "message": "Driver should improve on time management. Arrived 15 minutes late."},
]


def seed_storage(storage: Storage, settings) -> bool:
    """Load fixtures if the store has no users yet. Returns True if anything was inserted."""
    if not storage.is_empty():
        logger.info("Storage already populated, skipping seed")
        return False

    storage.create_user({
        "username": settings.ADMIN_USERNAME,
        "email": settings.ADMIN_EMAIL,
        "password": hash_password(settings.ADMIN_PASSWORD),
        "is_admin": True,
    })

    drivers = [storage.create_driver(data) for data in SAMPLE_DRIVERS]
    for plate, vehicle_type, owner in SAMPLE_VEHICLES:
        storage.create_vehicle({"plate_number": plate, "type": vehicle_type, "driver_id": drivers[owner].id})
    for data in SAMPLE_FEEDBACKS:
        storage.create_feedback(data)

    logger.info(
        f"Seeded admin '{settings.ADMIN_EMAIL}', {len(SAMPLE_DRIVERS)} drivers, "
        f"{len(SAMPLE_VEHICLES)} vehicles, {len(SAMPLE_FEEDBACKS)} feedbacks"
    )
    return True
