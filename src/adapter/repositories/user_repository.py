from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import DuplicateKeyError, IUserRepository
from src.domain.base import utc_now
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_reset_token(self, reset_token: str) -> Optional[User]:
        """Get user by password reset token"""
        stmt = select(User).where(User.reset_token == reset_token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateKeyError(f"User {user.email} already exists") from exc
        await self.session.refresh(user)
        return user

    async def update_by_id(self, user_id: UUID, fields: Dict[str, Any]) -> Optional[User]:
        return await self._apply(await self.find_by_id(user_id), fields)

    async def update_by_email(self, email: str, fields: Dict[str, Any]) -> Optional[User]:
        return await self._apply(await self.find_by_email(email), fields)

    async def update_by_reset_token(
        self, reset_token: str, fields: Dict[str, Any]
    ) -> Optional[User]:
        return await self._apply(await self.find_by_reset_token(reset_token), fields)

    async def _apply(self, user: Optional[User], fields: Dict[str, Any]) -> Optional[User]:
        if user is None:
            return None

        for name, value in fields.items():
            setattr(user, name, value)
        user.updated_at = utc_now()

        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
