"""
User Entity

A company administrator able to sign in.
"""

import secrets
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import UserRole


def normalize_email(email: str) -> str:
    """Emails are compared case-insensitively and stored trimmed"""
    return email.strip().lower()


class User(SQLModel, table=True):
    """
    User entity - one principal per tenant admin.

    Business Rules:
    - Email is unique across all companies (not only per tenant)
    - password_hash stays empty until the user creates a password
    - At most one live verification token; issuing a new one overwrites it
    - Once verified, the verification token fields are cleared
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: Optional[str] = Field(default=None, max_length=60)  # Bcrypt output is 60 chars
    full_name: str = Field(max_length=255)
    job_title: str = Field(default="", max_length=255)

    role: UserRole = Field(default=UserRole.admin)
    company_id: UUID = Field(foreign_key="companies.id", index=True)

    is_email_verified: bool = Field(default=False)
    verification_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    verification_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_company", "company_id", "role"),)

    def issue_verification_token(self, lifetime: timedelta) -> str:
        """Replace any previous verification token and return the new one"""
        token = secrets.token_urlsafe(32)
        self.verification_token = token
        self.verification_token_expires_at = utcnow() + lifetime
        return token

    def mark_email_verified(self) -> None:
        self.is_email_verified = True
        self.verification_token = None
        self.verification_token_expires_at = None

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash)
