from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.department_repository import IDepartmentRepository
from src.domain.entities import Department


class DepartmentRepository(IDepartmentRepository):
    """Department repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_company(self, company_id: UUID) -> List[Department]:
        stmt = (
            select(Department)
            .where(Department.company_id == company_id)
            .order_by(Department.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, department_id: UUID, company_id: UUID) -> Optional[Department]:
        stmt = select(Department).where(
            Department.id == department_id, Department.company_id == company_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, department: Department) -> Department:
        self.session.add(department)
        await self.session.flush()
        await self.session.refresh(department)
        return department

    async def update(self, department: Department) -> Department:
        self.session.add(department)
        await self.session.flush()
        await self.session.refresh(department)
        return department

    async def delete(self, department: Department) -> None:
        await self.session.delete(department)
        await self.session.flush()
