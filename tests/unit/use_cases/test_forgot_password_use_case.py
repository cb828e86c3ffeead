"""
Unit tests for ForgotPasswordUseCase

Tests cooldown, token generation and email delivery with mocked dependencies.
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.services.mailer import MailDeliveryError, SentMessage
from src.app.use_cases.auth import ForgotPasswordUseCase
from src.domain.entities import User


def make_user(now, **overrides):
    fields = dict(
        id=uuid4(),
        email="john@doe.com",
        hashed_password="irrelevant",
        password_last_updated_at=now - timedelta(hours=4),
    )
    fields.update(overrides)
    return User(**fields)


@pytest.mark.asyncio
async def test_successful_password_reset_request(mock_uow, auth_context, mailer, now):
    # Arrange
    mock_uow.users.find_by_email.return_value = make_user(now)
    use_case = ForgotPasswordUseCase(mock_uow, auth_context)

    # Act
    result = await use_case.execute("john@doe.com")

    # Assert
    assert result.is_ok()
    response = result.ok_value
    assert len(response.reset_token) == 32
    assert response.reset_token.isalnum()
    assert response.reset_token_expires_at == now + timedelta(minutes=10)
    assert response.reset_mail_recipient == "john@doe.com"

    # Token persisted before the mail goes out
    mock_uow.users.update_by_email.assert_called_once_with(
        "john@doe.com",
        {
            "reset_token": response.reset_token,
            "reset_token_expires_at": response.reset_token_expires_at,
        },
    )
    mock_uow.commit.assert_called_once()

    # Email embeds the reset link
    kwargs = mailer.send_mail.call_args.kwargs
    assert kwargs["to"] == "john@doe.com"
    assert kwargs["subject"] == "Password reset request"
    assert (
        f"http://frontend.test/reset-password?resetToken={response.reset_token}"
        in kwargs["html"]
    )
    assert "Julien" in kwargs["html"]

    # Expiry is sent as an instant, not a wall-clock time
    dumped = response.model_dump(mode="json", by_alias=True)
    assert dumped["resetTokenExpiresAt"].endswith("Z")


@pytest.mark.asyncio
async def test_response_uses_camel_case_keys(mock_uow, auth_context, now):
    mock_uow.users.find_by_email.return_value = make_user(now)

    result = await ForgotPasswordUseCase(mock_uow, auth_context).execute("john@doe.com")

    assert set(result.ok_value.model_dump(by_alias=True)) == {
        "resetToken",
        "resetTokenExpiresAt",
        "resetMailRecipient",
    }


@pytest.mark.asyncio
async def test_unknown_email(mock_uow, auth_context, mailer):
    mock_uow.users.find_by_email.return_value = None

    result = await ForgotPasswordUseCase(mock_uow, auth_context).execute("ghost@doe.com")

    assert result.is_err()
    assert result.err_value.code == "USER_NOT_FOUND"

    mock_uow.users.update_by_email.assert_not_called()
    mailer.send_mail.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("minutes_ago", [0, 5, 10])
async def test_cooldown_after_password_change(mock_uow, auth_context, mailer, now, minutes_ago):
    """Password changed within the timeout (inclusive) blocks a new request"""
    mock_uow.users.find_by_email.return_value = make_user(
        now, password_last_updated_at=now - timedelta(minutes=minutes_ago)
    )

    result = await ForgotPasswordUseCase(mock_uow, auth_context).execute("john@doe.com")

    assert result.is_err()
    assert result.err_value.code == "COOLDOWN_ACTIVE"
    mock_uow.users.update_by_email.assert_not_called()
    mailer.send_mail.assert_not_called()


@pytest.mark.asyncio
async def test_cooldown_just_elapsed(mock_uow, auth_context, now):
    mock_uow.users.find_by_email.return_value = make_user(
        now, password_last_updated_at=now - timedelta(minutes=10, seconds=1)
    )

    result = await ForgotPasswordUseCase(mock_uow, auth_context).execute("john@doe.com")

    assert result.ok_value.reset_token


@pytest.mark.asyncio
async def test_cooldown_while_reset_pending(mock_uow, auth_context, mailer, now):
    """A second request while the previous token is still valid is refused"""
    mock_uow.users.find_by_email.return_value = make_user(
        now,
        reset_token="a" * 32,
        reset_token_expires_at=now + timedelta(minutes=5),
    )

    result = await ForgotPasswordUseCase(mock_uow, auth_context).execute("john@doe.com")

    assert result.err_value.code == "COOLDOWN_ACTIVE"

    mailer.send_mail.assert_not_called()


@pytest.mark.asyncio
async def test_expired_reset_is_superseded(mock_uow, auth_context, now):
    mock_uow.users.find_by_email.return_value = make_user(
        now,
        reset_token="a" * 32,
        reset_token_expires_at=now - timedelta(minutes=1),
    )

    result = await ForgotPasswordUseCase(mock_uow, auth_context).execute("john@doe.com")

    assert result.ok_value.reset_token != "a" * 32
    fields = mock_uow.users.update_by_email.call_args.args[1]
    assert fields["reset_token"] == result.ok_value.reset_token


@pytest.mark.asyncio
async def test_mail_failure_propagates_after_commit(mock_uow, auth_context, mailer, now):
    mock_uow.users.find_by_email.return_value = make_user(now)
    mailer.send_mail.side_effect = ConnectionError("SMTP server unreachable")

    with pytest.raises(ConnectionError):
        await ForgotPasswordUseCase(mock_uow, auth_context).execute("john@doe.com")

    # Token already stored; recovery is a new request after the cooldown
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_no_accepted_recipient(mock_uow, auth_context, mailer, now):
    mock_uow.users.find_by_email.return_value = make_user(now)
    mailer.send_mail.side_effect = None
    mailer.send_mail.return_value = SentMessage(accepted_recipients=[])

    with pytest.raises(MailDeliveryError):
        await ForgotPasswordUseCase(mock_uow, auth_context).execute("john@doe.com")
