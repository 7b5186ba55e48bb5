"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional

from src.domain.base import CamelModel
from .register_dto import UserInfo


# ============================================================================
# Response DTOs
# ============================================================================


class CompanyInfo(CamelModel):
    """Company information in login and context responses"""

    id: str
    name: str
    email: str
    is_onboarding_complete: bool

    @classmethod
    def from_company(cls, company) -> "CompanyInfo":
        return cls(
            id=str(company.id),
            name=company.name,
            email=company.email,
            is_onboarding_complete=company.is_onboarding_complete,
        )


class LoginResponse(CamelModel):
    """Response for user login use case"""

    token: str
    user: UserInfo
    company: CompanyInfo


class VerifyEmailResponse(CamelModel):
    """Response for email verification use case"""

    is_email_verified: bool
    token: str


class ResendVerificationResponse(CamelModel):
    """Response for resend verification email use case"""

    email_preview: Optional[str] = None


class UpdateEmailResponse(CamelModel):
    """Response for update email use case"""

    email: str
    is_email_verified: bool
    email_preview: Optional[str] = None


class MeResponse(CamelModel):
    """Response for load context use case"""

    user: UserInfo
    company: CompanyInfo
