"""
Resend Verification Email Use Case

Issues a new verification token to the signed-in user and emails it.
"""

import logging
from datetime import timedelta

from src.libs.result import Error, Result, Return
from src.app.services.email_sender import EmailDeliveryError, EmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import ResendVerificationResponse

logger = logging.getLogger(__name__)


class ResendVerificationUseCase:
    """
    Use case for resending email verification.

    Business Rules:
    - Already verified users get ALREADY_VERIFIED
    - New token replaces old token (invalidates previous)
    - Token expiry reset to 24 hours from now
    - The token is saved before sending; a send failure fails the request
      (EMAIL_DELIVERY_FAILED) since sending is the whole point of the call
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: EmailSender,
        expose_preview: bool = False,
        token_lifetime: timedelta = timedelta(hours=24),
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.expose_preview = expose_preview
        self.token_lifetime = token_lifetime

    async def execute(self, user: User) -> Result[ResendVerificationResponse]:
        """
        Execute resend verification email use case.

        Args:
            user: Authenticated user

        Returns:
            Result with optional email preview, or Error
        """
        async with self.uow:
            if user.is_email_verified:
                return Return.err(
                    Error("ALREADY_VERIFIED", "Email is already verified")
                )

            verification_token = user.issue_verification_token(self.token_lifetime)
            user = await self.uow.users.update(user)
            await self.uow.commit()

            try:
                sent = await self.email_sender.send_verification_email(
                    user, verification_token
                )
            except EmailDeliveryError as e:
                logger.error(f"Could not resend verification email to user {user.id}: {e}")
                return Return.err(
                    Error("EMAIL_DELIVERY_FAILED", "Failed to send verification email")
                )

            return Return.ok(
                ResendVerificationResponse(
                    email_preview=sent.preview_url if self.expose_preview else None
                )
            )
