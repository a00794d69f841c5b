# app/schemas/verify.py
from pydantic import Field
from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class VerifyRequest(CamelModel):
    plate_number: str = Field(min_length=1)


class VerifiedVehicle(CamelModel):
    plate_number: str
    type: str
    registration_date: Optional[datetime]


class VerifiedDriver(CamelModel):
    name: str
    license_number: str
    status: str


class VerifyResponse(CamelModel):
    verified: bool
    vehicle: VerifiedVehicle
    driver: VerifiedDriver
