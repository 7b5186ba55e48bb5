from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Department


class IDepartmentRepository(ABC):
    """Department repository interface. Every lookup is scoped to a company."""

    @abstractmethod
    async def list_by_company(self, company_id: UUID) -> List[Department]:
        pass

    @abstractmethod
    async def get(self, department_id: UUID, company_id: UUID) -> Optional[Department]:
        pass

    @abstractmethod
    async def create(self, department: Department) -> Department:
        pass

    @abstractmethod
    async def update(self, department: Department) -> Department:
        pass

    @abstractmethod
    async def delete(self, department: Department) -> None:
        pass
