"""
Login Use Case

Authenticates a company admin and issues a session token.
"""

from src.libs.result import Error, Result, Return
from src.app.services.passwords import verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole
from src.api.utils.jwt import create_session_token
from .dtos import CompanyInfo, LoginResponse
from .register_dto import UserInfo


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password share one error (INVALID_CREDENTIALS)
    - Unverified users are told to verify first (EMAIL_NOT_VERIFIED)
    - Verified users without a password are told to set one (PASSWORD_NOT_SET)
    - Session token carries user_id, email and role, valid for 7 days
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing token, user and company, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.is_email_verified:
                return Return.err(
                    Error(
                        "EMAIL_NOT_VERIFIED",
                        "Please verify your email before logging in",
                    )
                )

            if not user.has_password:
                return Return.err(
                    Error(
                        "PASSWORD_NOT_SET",
                        "Please set a password using the link sent to your email",
                    )
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            company = await self.uow.companies.get_by_id(user.company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            token = create_session_token(user.id, user.email, UserRole(user.role).value)

            return Return.ok(
                LoginResponse(
                    token=token,
                    user=UserInfo.from_user(user),
                    company=CompanyInfo.from_company(company),
                )
            )
