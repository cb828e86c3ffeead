from uuid import UUID

from result import Err, Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import Error
from .dtos import UserProfileResponse


class GetProfileUseCase:
    """Load the profile of the authenticated user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserProfileResponse, Error]:
        async with self.uow:
            user = await self.uow.users.find_by_id(user_id)
            if user is None:
                return Err(Error("USER_NOT_FOUND", "User not found"))

            return Ok(UserProfileResponse.from_user(user))
