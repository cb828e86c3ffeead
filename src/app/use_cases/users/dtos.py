from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_serializer

from src.domain.base import as_utc
from src.domain.entities import User


class EditUserCommand(BaseModel):
    """Profile fields to change; None leaves a field untouched"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserProfileResponse(BaseModel):
    """Public view of a user (no password or token hashes)"""

    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    password_last_updated_at: datetime
    created_at: datetime
    updated_at: datetime

    @field_serializer("password_last_updated_at", "created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> datetime:
        return as_utc(value)

    @classmethod
    def from_user(cls, user: User) -> "UserProfileResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            password_last_updated_at=user.password_last_updated_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
