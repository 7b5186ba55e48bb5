from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Role


class IRoleRepository(ABC):
    """Role repository interface. Every lookup is scoped to a company."""

    @abstractmethod
    async def list_by_company(self, company_id: UUID) -> List[Role]:
        pass

    @abstractmethod
    async def list_by_department(self, department_id: UUID, company_id: UUID) -> List[Role]:
        pass

    @abstractmethod
    async def get(self, role_id: UUID, company_id: UUID) -> Optional[Role]:
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        pass

    @abstractmethod
    async def update(self, role: Role) -> Role:
        pass

    @abstractmethod
    async def delete(self, role: Role) -> None:
        pass
