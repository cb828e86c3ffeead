from uuid import UUID

from result import Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import Error


class LogoutUseCase:
    """
    Invalidate the user's refresh token.

    Idempotent: logging out a user without a stored refresh token (or an
    unknown user) is a no-op that still succeeds.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[bool, Error]:
        async with self.uow:
            user = await self.uow.users.find_by_id(user_id)

            if user is not None and user.hashed_refresh_token is not None:
                await self.uow.users.update_by_id(user_id, {"hashed_refresh_token": None})
                await self.uow.commit()

            return Ok(True)
