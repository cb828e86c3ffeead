import logging

from result import Err, Ok, Result

from src.app.repositories.user_repository import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import Error
from .context import AuthContext
from .dtos import CredentialsCommand, TokenPair

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Business Logic:
    1. Validate password against the password policy
    2. Hash password with Argon2id
    3. Create User with password_last_updated_at=now
       (email uniqueness enforced by the store)
    4. Issue access/refresh tokens
    5. Store hash of the refresh token
    6. Commit transaction atomically
    """

    def __init__(self, uow: UnitOfWork, auth: AuthContext):
        self.uow = uow
        self.auth = auth

    async def execute(self, command: CredentialsCommand) -> Result[TokenPair, Error]:
        """
        Execute signup use case

        Args:
            command: CredentialsCommand with email and password

        Returns:
            Ok(TokenPair) for the new user, or Err with code
            WEAK_PASSWORD or EMAIL_TAKEN
        """
        weak_password = self.auth.password_policy.validate(command.password)
        if weak_password is not None:
            return Err(weak_password)

        hashed_password = await self.auth.hasher.hash(command.password)

        async with self.uow:
            try:
                user = await self.uow.users.create(
                    User(
                        email=command.email,
                        hashed_password=hashed_password,
                        password_last_updated_at=self.auth.clock(),
                    )
                )
            except DuplicateKeyError:
                return Err(Error("EMAIL_TAKEN", "Credentials taken"))

            tokens = await self.auth.issue_tokens(self.uow, user.id, user.email)

            await self.uow.commit()

        logger.info("User signed up")
        return Ok(tokens)
