"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Reset flow responses serialize with camelCase keys (resetToken, isExpired, ...)
since the reset link and frontend use those names.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from src.app.services.token_issuer import TokenPair
from src.domain.base import as_utc


# ============================================================================
# Commands
# ============================================================================


class CredentialsCommand(BaseModel):
    """Email/password pair for signup and signin"""

    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class PasswordResetTokenResponse(BaseModel):
    """Response for forgot password use case"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reset_token: str
    reset_token_expires_at: datetime
    reset_mail_recipient: str

    @field_serializer("reset_token_expires_at")
    def serialize_expiry(self, value: datetime) -> datetime:
        # Stored as naive UTC; clients need the offset to read it as an instant
        return as_utc(value)


class ResetTokenValidityResponse(BaseModel):
    """Response for check reset token use case; email omitted once expired"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_expired: bool
    email: Optional[str] = None


__all__ = [
    "CredentialsCommand",
    "TokenPair",
    "PasswordResetTokenResponse",
    "ResetTokenValidityResponse",
]
