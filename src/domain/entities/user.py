"""
User Entity

Represents a registered account and its credential state.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - email/password account with token and reset state.

    Business Rules:
    - Email must be unique across all users
    - Password stored as Argon2id hash
    - hashed_refresh_token holds the hash of the only valid refresh token
      (None after logout or before the first issuance)
    - reset_token and reset_token_expires_at are set and cleared together
    - password_last_updated_at drives the password reset cooldown
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    hashed_password: str = Field(max_length=255)
    hashed_refresh_token: Optional[str] = Field(default=None, max_length=255)

    password_last_updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )

    # Password reset (forgot / reset flow)
    reset_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Profile
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
