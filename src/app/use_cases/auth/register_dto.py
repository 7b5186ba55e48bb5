"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- RegisterResponse: Output from use case (structured result)
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.domain.base import CamelModel
from src.domain.entities import UserRole


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    email: str
    full_name: str
    company_name: str
    phone: str = ""
    company_identifier: str = ""
    employee_count: str = ""
    job_title: str = ""


class UserInfo(CamelModel):
    """User information in auth responses"""

    id: str
    email: str
    full_name: str
    role: str
    is_email_verified: bool

    @classmethod
    def from_user(cls, user) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email,
            full_name=user.full_name,
            role=UserRole(user.role).value,
            is_email_verified=user.is_email_verified,
        )


class CompanyCreated(CamelModel):
    """Company information in register response"""

    id: str
    name: str
    email: str


class RegisterResponse(CamelModel):
    """
    Register response - structured output from use case

    token is a session token for the new admin so the verification screens
    (resend, change email) can call authenticated endpoints before a
    password exists.
    """

    user: UserInfo
    company: CompanyCreated
    token: str
    email_preview: Optional[str] = None
    # Not serialized: lets the API layer word the success message
    email_sent: bool = Field(default=True, exclude=True)
