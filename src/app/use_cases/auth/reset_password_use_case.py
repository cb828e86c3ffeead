"""
Reset Password Use Case

Consumes a password reset token and sets the new password.
"""

import logging

from result import Err, Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import Error
from .context import AuthContext

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for resetting a password with a reset token.

    Business Rules:
    - New password must pass the same policy as signup
    - Token must match a user and must not be expired
    - Token is single-use: cleared together with its expiry
    - password_last_updated_at is set to now, which restarts the cooldown
    """

    def __init__(self, uow: UnitOfWork, auth: AuthContext):
        self.uow = uow
        self.auth = auth

    async def execute(self, password: str, reset_token: str) -> Result[None, Error]:
        """
        Execute reset password use case.

        Args:
            password: New plain text password
            reset_token: Token from the reset link

        Returns:
            Ok(None), or Err with code WEAK_PASSWORD or INVALID_TOKEN
            (unknown or expired token)
        """
        weak_password = self.auth.password_policy.validate(password)
        if weak_password is not None:
            return Err(weak_password)

        async with self.uow:
            user = await self.uow.users.find_by_reset_token(reset_token)
            if user is None:
                return Err(Error("INVALID_TOKEN", "Reset token doesn't match any user"))

            now = self.auth.clock()
            if now > user.reset_token_expires_at:
                return Err(Error("INVALID_TOKEN", "Password reset token has expired"))

            hashed_password = await self.auth.hasher.hash(password)

            await self.uow.users.update_by_reset_token(
                reset_token,
                {
                    "hashed_password": hashed_password,
                    "password_last_updated_at": now,
                    "reset_token": None,
                    "reset_token_expires_at": None,
                },
            )
            await self.uow.commit()

        logger.info("Password reset completed")
        return Ok(None)
