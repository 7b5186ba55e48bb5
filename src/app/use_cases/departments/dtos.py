"""
Department Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.base import CamelModel


class DepartmentCommand(BaseModel):
    """Validated department fields, used for create and full update"""

    name: str
    email: Optional[str] = None
    lead: Optional[str] = None


class DepartmentResponse(CamelModel):
    id: str
    name: str
    email: Optional[str] = None
    lead: Optional[str] = None
    company_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, department) -> "DepartmentResponse":
        return cls(
            id=str(department.id),
            name=department.name,
            email=department.email,
            lead=department.lead,
            company_id=str(department.company_id),
            created_at=department.created_at,
        )
