"""
Role Use Case DTOs
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.base import CamelModel


class RoleCommand(BaseModel):
    """Validated role fields, used for create and full update"""

    title: str
    department_id: UUID
    responsibilities: Optional[str] = None


class DepartmentSummary(CamelModel):
    id: str
    name: str


class RoleResponse(CamelModel):
    id: str
    title: str
    responsibilities: Optional[str] = None
    department: DepartmentSummary
    company_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, role, department) -> "RoleResponse":
        return cls(
            id=str(role.id),
            title=role.title,
            responsibilities=role.responsibilities,
            department=DepartmentSummary(id=str(department.id), name=department.name),
            company_id=str(role.company_id),
            created_at=role.created_at,
        )
