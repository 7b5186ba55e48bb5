from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.employee_repository import (
    DuplicateEmployeeEmailError,
    IEmployeeRepository,
)
from src.domain.entities import Employee


class EmployeeRepository(IEmployeeRepository):
    """Employee repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_company(self, company_id: UUID) -> List[Employee]:
        stmt = (
            select(Employee)
            .where(Employee.company_id == company_id)
            .order_by(Employee.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_department(self, department_id: UUID, company_id: UUID) -> List[Employee]:
        stmt = select(Employee).where(
            Employee.department_id == department_id, Employee.company_id == company_id
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_role(self, role_id: UUID, company_id: UUID) -> List[Employee]:
        stmt = select(Employee).where(
            Employee.role_id == role_id, Employee.company_id == company_id
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, employee_id: UUID, company_id: UUID) -> Optional[Employee]:
        stmt = select(Employee).where(
            Employee.id == employee_id, Employee.company_id == company_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(
        self, email: str, company_id: UUID, exclude_id: Optional[UUID] = None
    ) -> Optional[Employee]:
        stmt = select(Employee).where(
            Employee.email == email, Employee.company_id == company_id
        )
        if exclude_id is not None:
            stmt = stmt.where(Employee.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, employee: Employee) -> Employee:
        self.session.add(employee)
        await self._flush()
        await self.session.refresh(employee)
        return employee

    async def update(self, employee: Employee) -> Employee:
        self.session.add(employee)
        await self._flush()
        await self.session.refresh(employee)
        return employee

    async def _flush(self):
        # uq_employee_company_email backs up the email pre-check under concurrency
        try:
            await self.session.flush()
        except IntegrityError as e:
            if "email" in str(e.orig):
                raise DuplicateEmployeeEmailError(str(e.orig)) from e
            raise

    async def delete(self, employee: Employee) -> None:
        await self.session.delete(employee)
        await self.session.flush()
