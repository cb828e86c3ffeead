"""
Forgot Password Use Case

Handles generating password reset tokens and emailing the reset link.
"""

import logging
from datetime import datetime

from result import Err, Ok, Result

from src.app.services.mailer import MailDeliveryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import Error
from .context import AuthContext
from .dtos import PasswordResetTokenResponse

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Password reset request"

RESET_EMAIL_TEMPLATE = """<h1>Hello,</h1>
<p>You have requested to reset your password. Please click the link below to reset your password:</p>
<p><a href="{link}">{link}</a></p>
<p>If you didn't request this password reset, you can ignore this email.</p>
<p>Thanks,</p>
<p>{signature}</p>"""


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Unknown email is reported as USER_NOT_FOUND
    - Cooldown: refused while the last password change, or the last reset
      request, is no older than the reset token timeout
    - Token is 32 alphanumeric characters, valid for the reset token timeout
    - A new request replaces any previous token
    - Token is committed before the email goes out; a failed send
      propagates and the token stays stored
    """

    def __init__(self, uow: UnitOfWork, auth: AuthContext):
        self.uow = uow
        self.auth = auth

    async def execute(self, email: str) -> Result[PasswordResetTokenResponse, Error]:
        """
        Execute forgot password use case.

        Args:
            email: User's email address

        Returns:
            Ok(PasswordResetTokenResponse) with the token, its expiry and the
            recipient accepted by the mail server, or Err with code
            USER_NOT_FOUND or COOLDOWN_ACTIVE

        Raises:
            MailDeliveryError: mail server accepted no recipient
        """
        async with self.uow:
            user = await self.uow.users.find_by_email(email)
            if user is None:
                return Err(Error("USER_NOT_FOUND", f"User {email} doesn't exist"))

            if not self._cooldown_elapsed(user, self.auth.clock()):
                return Err(
                    Error(
                        "COOLDOWN_ACTIVE",
                        "Please wait before requesting another password reset",
                    )
                )

            reset = self.auth.reset_tokens.generate()

            await self.uow.users.update_by_email(
                email,
                {
                    "reset_token": reset.reset_token,
                    "reset_token_expires_at": reset.reset_token_expires_at,
                },
            )
            await self.uow.commit()

        logger.info("Password reset requested")

        reset_link = (
            f"{self.auth.settings.frontend_url}/reset-password"
            f"?resetToken={reset.reset_token}"
        )
        reset_mail_recipient = await self._send_reset_email(email, reset_link)

        return Ok(
            PasswordResetTokenResponse(
                reset_token=reset.reset_token,
                reset_token_expires_at=reset.reset_token_expires_at,
                reset_mail_recipient=reset_mail_recipient,
            )
        )

    def _cooldown_elapsed(self, user: User, now: datetime) -> bool:
        timeout = self.auth.settings.reset_token_timeout

        if now - user.password_last_updated_at <= timeout:
            return False

        # Expiry is request time + timeout, so a pending token means the
        # last request is within the cooldown window.
        if user.reset_token is not None and user.reset_token_expires_at >= now:
            return False

        return True

    async def _send_reset_email(self, email: str, reset_link: str) -> str:
        html = RESET_EMAIL_TEMPLATE.format(
            link=reset_link, signature=self.auth.settings.mail_sender_name
        )
        try:
            sent = await self.auth.mailer.send_mail(
                to=email, subject=RESET_EMAIL_SUBJECT, html=html
            )
        except Exception:
            logger.error("Failed to send password reset email")
            raise

        if not sent.accepted_recipients:
            raise MailDeliveryError(f"Reset email to {email} was not accepted")

        return sent.accepted_recipients[0]
