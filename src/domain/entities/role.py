from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Role(SQLModel, table=True):
    """
    Job role inside a department.

    Not to be confused with UserRole: these are HR positions staged by the
    onboarding wizard, never used for authorization.
    """

    __tablename__ = "roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    responsibilities: Optional[str] = None
    department_id: UUID = Field(foreign_key="departments.id", index=True)
    company_id: UUID = Field(foreign_key="companies.id", index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
