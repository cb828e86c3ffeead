"""
SMTP mailer.

Uses aiosmtplib for asynchronous email sending via SMTP.
"""

import logging
from email.message import EmailMessage

import aiosmtplib
from pydantic import BaseModel

from src.app.services.mailer import IMailer, MailDeliveryError, SentMessage

logger = logging.getLogger(__name__)


class SmtpSettings(BaseModel):
    """Configuration settings for the SMTP mailer"""

    host: str
    port: int = 587
    username: str = ""
    password: str = ""
    start_tls: bool = True
    from_email: str
    from_name: str = "The Auth Team"
    timeout: int = 10

    @classmethod
    def from_config(cls, config) -> "SmtpSettings":
        return cls(
            host=config.MAILER_HOST,
            port=config.MAILER_PORT,
            username=config.MAILER_USER,
            password=config.MAILER_PASSWORD,
            start_tls=config.MAILER_START_TLS,
            from_email=config.MAILER_FROM,
            from_name=config.MAILER_SENDER_NAME,
            timeout=config.MAILER_TIMEOUT,
        )


class SmtpMailer(IMailer):
    """SMTP implementation of IMailer"""

    def __init__(self, settings: SmtpSettings):
        self.settings = settings

    async def send_mail(self, to: str, subject: str, html: str) -> SentMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = f"{self.settings.from_name} <{self.settings.from_email}>"
        message["To"] = to
        message.set_content(html, subtype="html")

        try:
            refused, response = await aiosmtplib.send(
                message,
                hostname=self.settings.host,
                port=self.settings.port,
                username=self.settings.username or None,
                password=self.settings.password or None,
                start_tls=self.settings.start_tls,
                timeout=self.settings.timeout,
            )
        except aiosmtplib.SMTPException:
            logger.error(f"Failed to send email via SMTP host {self.settings.host}")
            raise

        accepted = [to] if to not in refused else []
        if not accepted:
            raise MailDeliveryError(f"Mail server refused recipient {to}: {response}")

        return SentMessage(accepted_recipients=accepted)
