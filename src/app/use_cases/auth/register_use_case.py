import logging
from datetime import timedelta

from src.libs.result import Error, Result, Return
from src.app.repositories.user_repository import DuplicateEmailError
from src.app.services.email_sender import EmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Company, User, UserRole, normalize_email
from src.api.utils.jwt import create_session_token
from .register_dto import CompanyCreated, RegisterCommand, RegisterResponse, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case - creates a company and its admin user

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse] (structured response)

    Business Logic:
    1. Reject missing email, full name or company name
    2. Reject an email that is already registered
    3. Create the Company, then the admin User referencing it, in one transaction
    4. Issue a 24-hour verification token on the User
    5. Commit, then send the verification email
    6. An email failure does not undo the registration: the response
       reports email_sent=False and the user can ask for a resend
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

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with email, full_name, company_name and
                optional company details

        Returns:
            Result[RegisterResponse] with user and company data,
            or Error(VALIDATION_ERROR / EMAIL_ALREADY_REGISTERED)
        """
        if not (
            command.email.strip()
            and command.full_name.strip()
            and command.company_name.strip()
        ):
            return Return.err(Error("VALIDATION_ERROR", "Missing required fields"))

        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_REGISTERED", "Email is already registered")
                )

            # Company first: the user row references it
            company = Company(
                name=command.company_name.strip(),
                email=email,
                phone=command.phone,
                company_identifier=command.company_identifier,
                employee_count=command.employee_count,
            )
            company = await self.uow.companies.create(company)

            user = User(
                email=email,
                full_name=command.full_name.strip(),
                job_title=command.job_title,
                role=UserRole.admin,
                company_id=company.id,
                is_email_verified=False,
            )
            verification_token = user.issue_verification_token(self.token_lifetime)

            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except DuplicateEmailError:
                return Return.err(
                    Error("EMAIL_ALREADY_REGISTERED", "Email is already registered")
                )

            logger.info(f"Registered company {company.id} with admin user {user.id}")

            email_sent = True
            email_preview = None
            try:
                sent = await self.email_sender.send_verification_email(
                    user, verification_token
                )
                if self.expose_preview:
                    email_preview = sent.preview_url
            except Exception:
                # The account is committed; the user can ask for a resend
                logger.exception(
                    f"Registration of {user.id} succeeded but verification email failed"
                )
                email_sent = False

            token = create_session_token(user.id, user.email, UserRole(user.role).value)

            return Return.ok(
                RegisterResponse(
                    user=UserInfo.from_user(user),
                    company=CompanyCreated(
                        id=str(company.id), name=company.name, email=company.email
                    ),
                    token=token,
                    email_preview=email_preview,
                    email_sent=email_sent,
                )
            )
