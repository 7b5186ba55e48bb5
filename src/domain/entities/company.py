"""
Company Entity

Tenant root: every user, department, role and employee points at one company.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Company(SQLModel, table=True):
    """
    Company entity - the tenant.

    Business Rules:
    - Created during registration, before its admin user
    - is_onboarding_complete flips to True once the onboarding wizard finishes
    - Never deleted
    """

    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    phone: str = Field(default="", max_length=64)
    # External identifier supplied by the company (registration number etc.)
    company_identifier: str = Field(default="", max_length=255)
    employee_count: str = Field(default="", max_length=64)

    is_onboarding_complete: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
