import random
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from argon2 import PasswordHasher

from src.adapter.services.argon2_hasher import Argon2CredentialHasher
from src.adapter.services.jwt_token_issuer import JwtTokenIssuer
from src.app.services.auth_settings import AuthSettings
from src.app.services.mailer import SentMessage
from src.app.services.password_policy import PasswordPolicy
from src.app.services.reset_token_generator import ResetTokenGenerator
from src.app.use_cases.auth import AuthContext

NOW = datetime(2024, 3, 1, 12, 0, 0)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock user repository
    uow.users = MagicMock()
    uow.users.find_by_email = AsyncMock()
    uow.users.find_by_id = AsyncMock()
    uow.users.find_by_reset_token = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update_by_id = AsyncMock()
    uow.users.update_by_email = AsyncMock()
    uow.users.update_by_reset_token = AsyncMock()

    return uow


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def auth_settings():
    return AuthSettings(
        access_token_secret="test-access-secret",
        refresh_token_secret="test-refresh-secret",
        access_token_ttl=timedelta(minutes=15),
        refresh_token_ttl=timedelta(days=7),
        reset_token_timeout=timedelta(minutes=10),
        frontend_url="http://frontend.test",
        mail_sender_name="Julien",
    )


@pytest.fixture
def hasher():
    # Minimal Argon2 cost keeps the suite fast
    return Argon2CredentialHasher(PasswordHasher(time_cost=1, memory_cost=8, parallelism=1))


@pytest.fixture
def mailer():
    mailer = MagicMock()

    async def send_mail(to, subject, html):
        return SentMessage(accepted_recipients=[to])

    mailer.send_mail = AsyncMock(side_effect=send_mail)
    return mailer


@pytest.fixture
def auth_context(auth_settings, hasher, mailer, now):
    clock = lambda: now  # noqa: E731
    return AuthContext(
        settings=auth_settings,
        password_policy=PasswordPolicy(min_length=8),
        hasher=hasher,
        token_issuer=JwtTokenIssuer(auth_settings),
        reset_tokens=ResetTokenGenerator(
            timeout=auth_settings.reset_token_timeout,
            rng=random.Random(1234),
            clock=clock,
        ),
        mailer=mailer,
        clock=clock,
    )
