import asyncio
from datetime import UTC, datetime, timedelta
from typing import Any, Dict
from uuid import UUID, uuid4

from jose import JWTError, jwt

from src.app.services.auth_settings import AuthSettings
from src.app.services.token_issuer import ITokenIssuer, TokenPair
from src.domain.errors import InvalidTokenError


class JwtTokenIssuer(ITokenIssuer):
    """
    JWT implementation of ITokenIssuer.

    Access and refresh tokens are signed with separate secrets so a leaked
    access secret cannot mint refresh tokens (and vice versa). Every token
    carries a random jti, so two pairs issued in the same second differ.
    """

    def __init__(self, settings: AuthSettings):
        self.settings = settings

    async def issue(self, user_id: UUID, email: str) -> TokenPair:
        """
        Generate access and refresh tokens for a user.

        Args:
            user_id: User UUID (sub claim)
            email: User email

        Returns:
            TokenPair with both JWT strings
        """
        access_token, refresh_token = await asyncio.gather(
            asyncio.to_thread(
                self._sign,
                user_id,
                email,
                self.settings.access_token_secret,
                self.settings.access_token_ttl,
            ),
            asyncio.to_thread(
                self._sign,
                user_id,
                email,
                self.settings.refresh_token_secret,
                self.settings.refresh_token_ttl,
            ),
        )
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def verify_access(self, token: str) -> Dict[str, Any]:
        return self._decode(token, self.settings.access_token_secret)

    def verify_refresh(self, token: str) -> Dict[str, Any]:
        return self._decode(token, self.settings.refresh_token_secret)

    def _sign(self, user_id: UUID, email: str, secret: str, ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "email": email,
            "jti": uuid4().hex,
            "iat": now,
            "exp": now + ttl,
        }
        return jwt.encode(payload, secret, algorithm=self.settings.jwt_algorithm)

    def _decode(self, token: str, secret: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, secret, algorithms=[self.settings.jwt_algorithm])
        except JWTError as exc:
            raise InvalidTokenError("Token is invalid or expired") from exc
