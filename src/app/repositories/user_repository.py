from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from uuid import UUID

from src.domain.entities import User


class DuplicateKeyError(Exception):
    """Raised by the store when a unique constraint (email) is violated"""


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def find_by_reset_token(self, reset_token: str) -> Optional[User]:
        """Get user by password reset token"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user, raising DuplicateKeyError if the email exists"""
        pass

    @abstractmethod
    async def update_by_id(self, user_id: UUID, fields: Dict[str, Any]) -> Optional[User]:
        """Apply fields to the user with this ID; None if no user matched"""
        pass

    @abstractmethod
    async def update_by_email(self, email: str, fields: Dict[str, Any]) -> Optional[User]:
        """Apply fields to the user with this email; None if no user matched"""
        pass

    @abstractmethod
    async def update_by_reset_token(
        self, reset_token: str, fields: Dict[str, Any]
    ) -> Optional[User]:
        """Apply fields to the user holding this reset token; None if no user matched"""
        pass
