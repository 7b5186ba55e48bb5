"""
Department Use Cases

Tenant-scoped CRUD over departments. Every lookup filters by the caller's
company, so a department of another company behaves as if it did not exist.
"""

from typing import List
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Department, normalize_email
from .dtos import DepartmentCommand, DepartmentResponse

DEPARTMENT_NOT_FOUND = Error("DEPARTMENT_NOT_FOUND", "Department not found")


def _clean(command: DepartmentCommand) -> dict:
    return {
        "name": command.name.strip(),
        "email": normalize_email(command.email) if command.email else None,
        "lead": command.lead or None,
    }


class ListDepartmentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID) -> Result[List[DepartmentResponse]]:
        async with self.uow:
            departments = await self.uow.departments.list_by_company(company_id)
            return Return.ok([DepartmentResponse.from_entity(d) for d in departments])


class GetDepartmentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, department_id: UUID) -> Result[DepartmentResponse]:
        async with self.uow:
            department = await self.uow.departments.get(department_id, company_id)
            if department is None:
                return Return.err(DEPARTMENT_NOT_FOUND)
            return Return.ok(DepartmentResponse.from_entity(department))


class CreateDepartmentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: UUID, command: DepartmentCommand
    ) -> Result[DepartmentResponse]:
        async with self.uow:
            department = Department(company_id=company_id, **_clean(command))
            department = await self.uow.departments.create(department)
            await self.uow.commit()
            return Return.ok(DepartmentResponse.from_entity(department))


class UpdateDepartmentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: UUID, department_id: UUID, command: DepartmentCommand
    ) -> Result[DepartmentResponse]:
        async with self.uow:
            department = await self.uow.departments.get(department_id, company_id)
            if department is None:
                return Return.err(DEPARTMENT_NOT_FOUND)

            for field, value in _clean(command).items():
                setattr(department, field, value)
            department = await self.uow.departments.update(department)
            await self.uow.commit()
            return Return.ok(DepartmentResponse.from_entity(department))


class DeleteDepartmentUseCase:
    """
    Business Rules:
    - A department that still has roles cannot be deleted (DEPARTMENT_IN_USE);
      roles and employees reference it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, department_id: UUID) -> Result[None]:
        async with self.uow:
            department = await self.uow.departments.get(department_id, company_id)
            if department is None:
                return Return.err(DEPARTMENT_NOT_FOUND)

            roles = await self.uow.roles.list_by_department(department_id, company_id)
            if roles:
                return Return.err(
                    Error(
                        "DEPARTMENT_IN_USE",
                        "Department still has roles; delete or move them first",
                    )
                )

            await self.uow.departments.delete(department)
            await self.uow.commit()
            return Return.ok(None)
