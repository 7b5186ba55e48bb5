from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Employee


class DuplicateEmployeeEmailError(Exception):
    """Raised by create/update when another employee of the company owns the email"""


class IEmployeeRepository(ABC):
    """Employee repository interface. Every lookup is scoped to a company."""

    @abstractmethod
    async def list_by_company(self, company_id: UUID) -> List[Employee]:
        pass

    @abstractmethod
    async def list_by_department(self, department_id: UUID, company_id: UUID) -> List[Employee]:
        pass

    @abstractmethod
    async def list_by_role(self, role_id: UUID, company_id: UUID) -> List[Employee]:
        pass

    @abstractmethod
    async def get(self, employee_id: UUID, company_id: UUID) -> Optional[Employee]:
        pass

    @abstractmethod
    async def get_by_email(
        self, email: str, company_id: UUID, exclude_id: Optional[UUID] = None
    ) -> Optional[Employee]:
        """Get an employee of the company by email, optionally ignoring one employee"""
        pass

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        pass

    @abstractmethod
    async def update(self, employee: Employee) -> Employee:
        pass

    @abstractmethod
    async def delete(self, employee: Employee) -> None:
        pass
