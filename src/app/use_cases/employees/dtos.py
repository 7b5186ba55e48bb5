"""
Employee Use Case DTOs
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.base import CamelModel
from src.app.use_cases.roles.dtos import DepartmentSummary


class EmployeeCommand(BaseModel):
    """Validated employee fields, used for create and full update"""

    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department_id: UUID
    role_id: UUID
    start_date: date


class RoleSummary(CamelModel):
    id: str
    title: str


class EmployeeResponse(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    start_date: date
    department: DepartmentSummary
    role: RoleSummary
    company_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, employee, department, role) -> "EmployeeResponse":
        return cls(
            id=str(employee.id),
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            phone=employee.phone,
            start_date=employee.start_date,
            department=DepartmentSummary(id=str(department.id), name=department.name),
            role=RoleSummary(id=str(role.id), title=role.title),
            company_id=str(employee.company_id),
            created_at=employee.created_at,
        )
