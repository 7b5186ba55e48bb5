from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from src.domain.entities import User


class EmailDeliveryError(Exception):
    """Raised by an EmailSender when the message could not be handed off"""


@dataclass(frozen=True)
class SentEmail:
    message_id: str
    # Link to inspect the message without a real inbox (console/sandbox senders only)
    preview_url: Optional[str] = None


class EmailSender(ABC):
    """
    Outbound email capability.

    Constructed once at process start and shared by all requests; use cases
    receive it explicitly so tests can substitute a fake.
    """

    @abstractmethod
    async def send_verification_email(self, user: User, token: str) -> SentEmail:
        """
        Send the email-verification link for token to user.email.

        Raises:
            EmailDeliveryError: if the message could not be sent
        """
        pass
