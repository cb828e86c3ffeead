"""
Refresh Token Use Case

Handles token refresh with refresh token rotation for security.
"""

from uuid import UUID

from result import Err, Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import Error
from .context import AuthContext
from .dtos import TokenPair


class RefreshTokenUseCase:
    """
    Use case for refreshing the token pair.

    The refresh token's signature and expiry are checked by the API guard
    before this runs; the use case only compares it with the stored hash.

    Business Rules:
    - Refresh token rotation: old token invalidated, new token issued
    - Logged out users (no stored hash) cannot refresh
    - Replaying a rotated token fails with INVALID_CREDENTIALS
    """

    def __init__(self, uow: UnitOfWork, auth: AuthContext):
        self.uow = uow
        self.auth = auth

    async def execute(self, user_id: UUID, refresh_token: str) -> Result[TokenPair, Error]:
        """
        Execute refresh token use case.

        Args:
            user_id: User ID taken from the verified refresh token
            refresh_token: The raw refresh token to compare and rotate

        Returns:
            Ok(TokenPair) with the new pair, or Err INVALID_CREDENTIALS when
            there is no stored hash or it does not match
        """
        async with self.uow:
            user = await self.uow.users.find_by_id(user_id)

            if user is None or user.hashed_refresh_token is None:
                return Err(Error("INVALID_CREDENTIALS", "Credentials incorrect"))

            refresh_token_matches = await self.auth.hasher.verify(
                user.hashed_refresh_token, refresh_token
            )
            if not refresh_token_matches:
                return Err(Error("INVALID_CREDENTIALS", "Credentials incorrect"))

            tokens = await self.auth.issue_tokens(self.uow, user.id, user.email)

            await self.uow.commit()

            return Ok(tokens)
