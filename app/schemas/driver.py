# app/schemas/driver.py
from pydantic import Field
from datetime import datetime
from typing import Literal, Optional

from app.schemas.base import CamelModel

DriverStatus = Literal["active", "inactive", "suspended"]


class DriverCreate(CamelModel):
    name: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    license_number: str = Field(min_length=1)
    status: Optional[DriverStatus] = None      # defaults to active
    notes: Optional[str] = None


class DriverUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    phone_number: Optional[str] = Field(None, min_length=1)
    license_number: Optional[str] = Field(None, min_length=1)
    status: Optional[DriverStatus] = None
    notes: Optional[str] = None

    def changes(self) -> dict:
        """Fields the client actually sent. Only notes may be cleared with null."""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None or k == "notes"}


class DriverOut(CamelModel):
    id: int
    name: str
    phone_number: str
    license_number: str
    status: str
    notes: Optional[str]
    created_at: Optional[datetime]
