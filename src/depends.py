from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.argon2_hasher import Argon2CredentialHasher
from src.adapter.services.jwt_token_issuer import JwtTokenIssuer
from src.adapter.services.smtp_mailer import SmtpMailer, SmtpSettings
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.auth_settings import AuthSettings
from src.app.services.mailer import IMailer
from src.app.services.password_policy import PasswordPolicy
from src.app.services.reset_token_generator import ResetTokenGenerator
from src.app.services.token_issuer import ITokenIssuer
from src.app.use_cases.auth import AuthContext
from src.domain.base import utc_now
from src.domain.errors import Error, InvalidTokenError

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

auth_settings = AuthSettings.from_config(ApplicationConfig)
token_issuer = JwtTokenIssuer(auth_settings)
credential_hasher = Argon2CredentialHasher()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_issuer() -> ITokenIssuer:
    return token_issuer


def get_mailer() -> IMailer:
    return SmtpMailer(SmtpSettings.from_config(ApplicationConfig))


def get_auth_context(
    issuer: ITokenIssuer = Depends(get_token_issuer),
    mailer: IMailer = Depends(get_mailer),
) -> AuthContext:
    return AuthContext(
        settings=auth_settings,
        password_policy=PasswordPolicy(min_length=auth_settings.password_min_length),
        hasher=credential_hasher,
        token_issuer=issuer,
        reset_tokens=ResetTokenGenerator(
            timeout=auth_settings.reset_token_timeout, clock=utc_now
        ),
        mailer=mailer,
        clock=utc_now,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    issuer: ITokenIssuer = Depends(get_token_issuer),
) -> Dict[str, Any]:
    """
    Dependency to extract and verify the access token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing sub (user ID) and email

    Raises:
        ClientError: 401 if the header is missing or the token is invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Missing bearer token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        return issuer.verify_access(credentials.credentials)
    except InvalidTokenError as exc:
        raise ClientError(exc.error, status_code=status.HTTP_401_UNAUTHORIZED)


async def get_refresh_credentials(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    issuer: ITokenIssuer = Depends(get_token_issuer),
) -> Dict[str, Any]:
    """
    Dependency to verify the refresh token sent as bearer token.

    Returns:
        Decoded payload plus the raw token under "refresh_token"

    Raises:
        ClientError: 403 if the header is missing or the token is malformed,
            invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("INVALID_CREDENTIALS", "Missing refresh token"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    try:
        payload = issuer.verify_refresh(credentials.credentials)
    except InvalidTokenError:
        raise ClientError(
            Error("INVALID_CREDENTIALS", "Refresh token malformed or expired"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return {**payload, "refresh_token": credentials.credentials}


def user_id_from(payload: Dict[str, Any]) -> UUID:
    return UUID(payload["sub"])
