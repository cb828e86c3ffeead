from result import Err, Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import Error
from .context import AuthContext
from .dtos import ResetTokenValidityResponse


class CheckResetTokenUseCase:
    """
    Report whether a reset token is still usable.

    Unknown tokens fail with INVALID_TOKEN. Known tokens report is_expired;
    the account email is only revealed while the token is valid.
    """

    def __init__(self, uow: UnitOfWork, auth: AuthContext):
        self.uow = uow
        self.auth = auth

    async def execute(self, reset_token: str) -> Result[ResetTokenValidityResponse, Error]:
        async with self.uow:
            user = await self.uow.users.find_by_reset_token(reset_token)
            if user is None:
                return Err(Error("INVALID_TOKEN", "Reset token doesn't match any user"))

            if self.auth.clock() > user.reset_token_expires_at:
                return Ok(ResetTokenValidityResponse(is_expired=True))

            return Ok(ResetTokenValidityResponse(is_expired=False, email=user.email))
