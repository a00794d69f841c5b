# app/schemas/user.py
from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator
from typing import Optional

from app.schemas.base import CamelModel


class LoginRequest(CamelModel):
    email: str
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def check_email_format(cls, value: str) -> str:
        # Account lookup is exact, so the address is validated but not normalized
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}")
        return value


class UserOut(CamelModel):
    """Public view of a user. The password hash is never part of it."""
    id: int
    username: str
    email: str
    is_admin: Optional[bool]


class UserEnvelope(CamelModel):
    user: UserOut


class LoginResponse(UserEnvelope):
    message: str
