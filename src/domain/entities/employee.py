"""
Employee Entity

Person on the company payroll. Employees do not sign in.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel, UniqueConstraint

from src.domain.base import utcnow


class Employee(SQLModel, table=True):
    """
    Employee entity.

    Business Rules:
    - department and role belong to the same company as the employee
    - role.department_id == department_id
    - email is unique within a company
    """

    __tablename__ = "employees"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    start_date: date
    department_id: UUID = Field(foreign_key="departments.id", index=True)
    role_id: UUID = Field(foreign_key="roles.id", index=True)
    company_id: UUID = Field(foreign_key="companies.id", index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (UniqueConstraint("company_id", "email", name="uq_employee_company_email"),)
