from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel


class MailDeliveryError(Exception):
    """The mail server accepted none of the recipients"""


class SentMessage(BaseModel):
    """Outcome of a send: the recipients the server accepted"""

    accepted_recipients: List[str]


class IMailer(ABC):
    """Outbound email interface - application layer"""

    @abstractmethod
    async def send_mail(self, to: str, subject: str, html: str) -> SentMessage:
        """
        Send an HTML email.

        Raises:
            MailDeliveryError: if no recipient was accepted
            Exception: transport errors propagate unchanged
        """
        pass
