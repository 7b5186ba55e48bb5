"""
Verify Email Use Case

Handles email verification via the token mailed at registration.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import UserRole
from src.api.utils.jwt import create_session_token
from .dtos import VerifyEmailResponse


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Token must match a user's verification_token and not be expired;
      unknown and expired tokens give the same INVALID_OR_EXPIRED_TOKEN
    - Sets is_email_verified = True and clears the token (single-use):
      submitting the same token again fails
    - Returns a fresh session token so the user can go on to create a password
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[VerifyEmailResponse]:
        """
        Execute email verification use case.

        Args:
            token: Verification token from email link

        Returns:
            Result with verification status, or Error(INVALID_OR_EXPIRED_TOKEN)
        """
        async with self.uow:
            user = await self.uow.users.get_by_verification_token(token, utcnow())

            if user is None:
                return Return.err(
                    Error(
                        "INVALID_OR_EXPIRED_TOKEN",
                        "Invalid or expired verification token",
                    )
                )

            user.mark_email_verified()
            user = await self.uow.users.update(user)

            await self.uow.commit()

            session_token = create_session_token(
                user.id, user.email, UserRole(user.role).value
            )

            return Return.ok(
                VerifyEmailResponse(is_email_verified=True, token=session_token)
            )
