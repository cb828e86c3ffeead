"""
Auth Context

Everything the auth use cases depend on besides the unit of work.
Passing it in explicitly lets tests substitute fixed secrets, a fixed
clock, fakes for the mailer, etc.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.app.services.auth_settings import AuthSettings
from src.app.services.credential_hasher import ICredentialHasher
from src.app.services.mailer import IMailer
from src.app.services.password_policy import PasswordPolicy
from src.app.services.reset_token_generator import ResetTokenGenerator
from src.app.services.token_issuer import ITokenIssuer, TokenPair
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import Clock, utc_now


@dataclass
class AuthContext:
    settings: AuthSettings
    password_policy: PasswordPolicy
    hasher: ICredentialHasher
    token_issuer: ITokenIssuer
    reset_tokens: ResetTokenGenerator
    mailer: IMailer
    clock: Clock = field(default=utc_now)

    async def issue_tokens(self, uow: UnitOfWork, user_id: UUID, email: str) -> TokenPair:
        """
        Issue a new token pair and store the hash of its refresh token.

        Overwriting the stored hash invalidates whatever refresh token the
        user held before (rotation). Caller commits.
        """
        tokens = await self.token_issuer.issue(user_id, email)
        hashed_refresh_token = await self.hasher.hash(tokens.refresh_token)
        await uow.users.update_by_id(user_id, {"hashed_refresh_token": hashed_refresh_token})
        return tokens
