"""
Update Email Use Case

Lets an admin correct the address used at registration.
"""

import logging
from datetime import timedelta

from src.libs.result import Error, Result, Return
from src.app.repositories.user_repository import DuplicateEmailError
from src.app.services.email_sender import EmailDeliveryError, EmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, normalize_email
from .dtos import UpdateEmailResponse

logger = logging.getLogger(__name__)


class UpdateEmailUseCase:
    """
    Use case for changing the signed-in user's email.

    Business Rules:
    - The new email must not belong to another user (EMAIL_IN_USE);
      keeping one's own current email is allowed
    - The user becomes unverified and receives a new verification token
    - Email send failure fails the request, as for resend
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

    async def execute(self, user: User, new_email: str) -> Result[UpdateEmailResponse]:
        """
        Execute update email use case.

        Args:
            user: Authenticated user
            new_email: Address to switch to

        Returns:
            Result with UpdateEmailResponse, or Error(EMAIL_IN_USE / EMAIL_DELIVERY_FAILED)
        """
        email = normalize_email(new_email)

        async with self.uow:
            other_user = await self.uow.users.get_by_email_excluding(email, user.id)
            if other_user is not None:
                return Return.err(Error("EMAIL_IN_USE", "Email is already in use"))

            user.email = email
            user.is_email_verified = False
            verification_token = user.issue_verification_token(self.token_lifetime)

            try:
                user = await self.uow.users.update(user)
                await self.uow.commit()
            except DuplicateEmailError:
                return Return.err(Error("EMAIL_IN_USE", "Email is already in use"))

            try:
                sent = await self.email_sender.send_verification_email(
                    user, verification_token
                )
            except EmailDeliveryError as e:
                logger.error(f"Could not send verification email to user {user.id}: {e}")
                return Return.err(
                    Error("EMAIL_DELIVERY_FAILED", "Failed to send verification email")
                )

            return Return.ok(
                UpdateEmailResponse(
                    email=user.email,
                    is_email_verified=user.is_email_verified,
                    email_preview=sent.preview_url if self.expose_preview else None,
                )
            )
