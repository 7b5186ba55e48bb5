from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Department(SQLModel, table=True):
    """Department of a company, created in the first onboarding step"""

    __tablename__ = "departments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    lead: Optional[str] = Field(default=None, max_length=255)
    company_id: UUID = Field(foreign_key="companies.id", index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
