from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.role_repository import IRoleRepository
from src.domain.entities import Role


class RoleRepository(IRoleRepository):
    """Role repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_company(self, company_id: UUID) -> List[Role]:
        stmt = select(Role).where(Role.company_id == company_id).order_by(Role.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_department(self, department_id: UUID, company_id: UUID) -> List[Role]:
        stmt = (
            select(Role)
            .where(Role.department_id == department_id, Role.company_id == company_id)
            .order_by(Role.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, role_id: UUID, company_id: UUID) -> Optional[Role]:
        stmt = select(Role).where(Role.id == role_id, Role.company_id == company_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, role: Role) -> Role:
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def update(self, role: Role) -> Role:
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def delete(self, role: Role) -> None:
        await self.session.delete(role)
        await self.session.flush()
