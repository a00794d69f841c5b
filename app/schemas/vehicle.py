# app/schemas/vehicle.py
from pydantic import Field
from datetime import datetime
from typing import Literal, Optional

from app.schemas.base import CamelModel

VehicleStatus = Literal["active", "suspended", "maintenance", "retired"]


class VehicleCreate(CamelModel):
    plate_number: str = Field(min_length=1)
    type: str = Field(min_length=1)
    driver_id: int
    status: Optional[VehicleStatus] = None     # defaults to active


class VehicleUpdate(CamelModel):
    plate_number: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    driver_id: Optional[int] = None
    status: Optional[VehicleStatus] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class VehicleOut(CamelModel):
    id: int
    plate_number: str
    type: str
    driver_id: int
    status: str
    registration_date: Optional[datetime]
