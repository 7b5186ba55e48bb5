from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field, field_validator

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.schemas import Envelope, RequiredStr
from src.app.services.email_sender import EmailSender
from src.app.services.passwords import password_policy_violations
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    CreatePasswordUseCase,
    LoadContextUseCase,
    LoginResponse,
    LoginUseCase,
    MeResponse,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    ResendVerificationResponse,
    ResendVerificationUseCase,
    UpdateEmailResponse,
    UpdateEmailUseCase,
    VerifyEmailResponse,
    VerifyEmailUseCase,
)
from src.depends import get_current_user, get_email_sender, get_unit_of_work
from src.domain.base import CamelModel
from src.domain.entities import User

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _token_lifetime() -> timedelta:
    return timedelta(hours=ApplicationConfig.VERIFICATION_TOKEN_EXPIRE_HOURS)


class RegisterRequest(CamelModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    Optional company details may be omitted, null or empty.
    """

    email: EmailStr = Field(..., description="Admin email address")
    full_name: RequiredStr = Field(..., description="Admin full name")
    company_name: RequiredStr = Field(..., description="Company name")
    phone: Optional[str] = None
    company_id: Optional[str] = Field(None, description="Company identifier")
    employee_count: Optional[str] = None
    job_title: Optional[str] = None


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[RegisterResponse],
    response_model_exclude_none=True,
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
):
    """
    Register a company and its admin user

    Creates the company and an unverified admin without a password, then
    sends the verification email. The admin sets a password after verifying.

    Raises:
        - 400 Bad Request: Invalid input or email already registered
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        email=request.email,
        full_name=request.full_name,
        company_name=request.company_name,
        phone=request.phone or "",
        company_identifier=request.company_id or "",
        employee_count=request.employee_count or "",
        job_title=request.job_title or "",
    )

    use_case = RegisterUseCase(
        uow,
        email_sender,
        expose_preview=ApplicationConfig.expose_email_preview(),
        token_lifetime=_token_lifetime(),
    )
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "EMAIL_ALREADY_REGISTERED"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    response = result.value
    if response.email_sent:
        message = "Registration successful. Please verify your email."
    else:
        message = (
            "Registration successful, but the verification email could not be sent. "
            "Please request a new one."
        )
    return Envelope(message=message, data=response)


class LoginRequest(CamelModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[LoginResponse],
    response_model_exclude_none=True,
)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid credentials, unverified email or no password yet
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_CREDENTIALS", "EMAIL_NOT_VERIFIED", "PASSWORD_NOT_SET"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return Envelope(message="Login successful", data=result.value)


class VerifyEmailRequest(CamelModel):
    token: RequiredStr = Field(..., description="Email verification token")


@router.post(
    "/verify-email",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[VerifyEmailResponse],
    response_model_exclude_none=True,
)
async def verify_email(
    request: VerifyEmailRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Verify Email

    Raises:
        - 400 Bad Request: Token unknown or expired
        - 500 Internal Server Error: Server error
    """
    use_case = VerifyEmailUseCase(uow)
    result = await use_case.execute(request.token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OR_EXPIRED_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return Envelope(message="Email verification successful", data=result.value)


@router.post(
    "/resend-verification",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[ResendVerificationResponse],
    response_model_exclude_none=True,
)
async def resend_verification(
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
):
    """
    Resend Verification Email

    Raises:
        - 400 Bad Request: Email already verified
        - 401 Unauthorized: Missing or invalid session token
        - 500 Internal Server Error: Email could not be sent
    """
    use_case = ResendVerificationUseCase(
        uow,
        email_sender,
        expose_preview=ApplicationConfig.expose_email_preview(),
        token_lifetime=_token_lifetime(),
    )
    result = await use_case.execute(current_user)

    if result.is_err():
        error = result.error
        if error.code == "ALREADY_VERIFIED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return Envelope(message="Verification email has been resent", data=result.value)


class UpdateEmailRequest(CamelModel):
    email: EmailStr = Field(..., description="New email address")


@router.post(
    "/update-email",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[UpdateEmailResponse],
    response_model_exclude_none=True,
)
async def update_email(
    request: UpdateEmailRequest,
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
):
    """
    Change the account email and restart verification

    Raises:
        - 400 Bad Request: Invalid email or email already in use
        - 401 Unauthorized: Missing or invalid session token
        - 500 Internal Server Error: Email could not be sent
    """
    use_case = UpdateEmailUseCase(
        uow,
        email_sender,
        expose_preview=ApplicationConfig.expose_email_preview(),
        token_lifetime=_token_lifetime(),
    )
    result = await use_case.execute(current_user, request.email)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_IN_USE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return Envelope(
        message="Email updated successfully. Please verify your new email.",
        data=result.value,
    )


class CreatePasswordRequest(CamelModel):
    password: str = Field(..., description="New account password")

    @field_validator("password")
    @classmethod
    def check_policy(cls, value: str) -> str:
        violations = password_policy_violations(value)
        if violations:
            raise ValueError(violations[0])
        return value


@router.post(
    "/create-password",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[None],
    response_model_exclude_none=True,
)
async def create_password(
    request: CreatePasswordRequest,
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Password

    Raises:
        - 400 Bad Request: Password does not meet the policy
        - 401 Unauthorized: Missing or invalid session token
        - 500 Internal Server Error: Server error
    """
    use_case = CreatePasswordUseCase(uow, bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS)
    result = await use_case.execute(current_user, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return Envelope(message="Password created successfully")


@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[MeResponse],
    response_model_exclude_none=True,
)
async def get_me(
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load the current user and their company

    Raises:
        - 401 Unauthorized: Missing or invalid session token
        - 500 Internal Server Error: Server error
    """
    use_case = LoadContextUseCase(uow)
    result = await use_case.execute(current_user)

    if result.is_err():
        raise ServerError(result.error)

    return Envelope(data=result.value)
