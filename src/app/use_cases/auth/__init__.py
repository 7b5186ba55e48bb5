"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .register_dto import RegisterCommand, RegisterResponse, UserInfo, CompanyCreated
from .login_use_case import LoginUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .resend_verification_use_case import ResendVerificationUseCase
from .update_email_use_case import UpdateEmailUseCase
from .create_password_use_case import CreatePasswordUseCase
from .load_context_use_case import LoadContextUseCase
from .dtos import (
    CompanyInfo,
    LoginResponse,
    MeResponse,
    ResendVerificationResponse,
    UpdateEmailResponse,
    VerifyEmailResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "VerifyEmailUseCase",
    "ResendVerificationUseCase",
    "UpdateEmailUseCase",
    "CreatePasswordUseCase",
    "LoadContextUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "VerifyEmailResponse",
    "ResendVerificationResponse",
    "UpdateEmailResponse",
    "MeResponse",
    # DTOs - Nested Models
    "UserInfo",
    "CompanyCreated",
    "CompanyInfo",
]
