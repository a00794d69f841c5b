# Park Fleet Verification: database models
# Import all models here for SQLAlchemy discovery

from typing import NewType

from app.models.user import User             # noqa
from app.models.driver import Driver         # noqa
from app.models.vehicle import Vehicle       # noqa
from app.models.feedback import Feedback     # noqa
from app.models.activity import Activity     # noqa

UserId = NewType("UserId", int)
DriverId = NewType("DriverId", int)
VehicleId = NewType("VehicleId", int)
FeedbackId = NewType("FeedbackId", int)
