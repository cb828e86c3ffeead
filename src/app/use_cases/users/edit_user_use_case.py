from uuid import UUID

from result import Err, Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import Error
from .dtos import EditUserCommand, UserProfileResponse


class EditUserUseCase:
    """
    Update profile fields of the authenticated user.

    Only fields present in the command are written; credentials cannot be
    changed here.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: EditUserCommand
    ) -> Result[UserProfileResponse, Error]:
        fields = command.model_dump(exclude_none=True)

        async with self.uow:
            if fields:
                user = await self.uow.users.update_by_id(user_id, fields)
            else:
                user = await self.uow.users.find_by_id(user_id)

            if user is None:
                return Err(Error("USER_NOT_FOUND", "User not found"))

            await self.uow.commit()

            return Ok(UserProfileResponse.from_user(user))
