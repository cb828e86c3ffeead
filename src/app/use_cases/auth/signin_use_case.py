"""
Signin Use Case

Handles email/password authentication and token issuance.
"""

from result import Err, Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import Error
from .context import AuthContext
from .dtos import CredentialsCommand, TokenPair


class SigninUseCase:
    """
    Use case for user signin.

    Business Rules:
    - Unknown email is reported as USER_NOT_FOUND
    - Password verified against the stored Argon2id hash
    - New refresh token hash overwrites any previous one, so only the
      latest refresh token stays usable
    """

    def __init__(self, uow: UnitOfWork, auth: AuthContext):
        self.uow = uow
        self.auth = auth

    async def execute(self, command: CredentialsCommand) -> Result[TokenPair, Error]:
        """
        Execute signin use case.

        Args:
            command: CredentialsCommand with email and password

        Returns:
            Ok(TokenPair) for the user, or Err with code USER_NOT_FOUND or
            INVALID_CREDENTIALS
        """
        async with self.uow:
            user = await self.uow.users.find_by_email(command.email)
            if user is None:
                return Err(Error("USER_NOT_FOUND", f"User {command.email} doesn't exist"))

            password_matches = await self.auth.hasher.verify(
                user.hashed_password, command.password
            )
            if not password_matches:
                return Err(Error("INVALID_CREDENTIALS", "Credentials incorrect"))

            tokens = await self.auth.issue_tokens(self.uow, user.id, user.email)

            await self.uow.commit()

            return Ok(tokens)
