"""
Role Use Cases

Tenant-scoped CRUD over job roles. A role always belongs to a department of
the same company.
"""

from typing import List
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Role
from .dtos import RoleCommand, RoleResponse

ROLE_NOT_FOUND = Error("ROLE_NOT_FOUND", "Role not found")
DEPARTMENT_NOT_FOUND = Error("DEPARTMENT_NOT_FOUND", "Department not found")
ROLE_IN_USE = Error("ROLE_IN_USE", "Role is assigned to employees; reassign them first")


async def _with_departments(uow: UnitOfWork, company_id: UUID, roles: List[Role]) -> List[RoleResponse]:
    departments = {
        d.id: d for d in await uow.departments.list_by_company(company_id)
    }
    return [RoleResponse.from_entity(r, departments[r.department_id]) for r in roles]


class ListRolesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID) -> Result[List[RoleResponse]]:
        async with self.uow:
            roles = await self.uow.roles.list_by_company(company_id)
            return Return.ok(await _with_departments(self.uow, company_id, roles))


class ListRolesByDepartmentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, department_id: UUID) -> Result[List[RoleResponse]]:
        async with self.uow:
            department = await self.uow.departments.get(department_id, company_id)
            if department is None:
                return Return.err(DEPARTMENT_NOT_FOUND)

            roles = await self.uow.roles.list_by_department(department_id, company_id)
            return Return.ok([RoleResponse.from_entity(r, department) for r in roles])


class GetRoleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, role_id: UUID) -> Result[RoleResponse]:
        async with self.uow:
            role = await self.uow.roles.get(role_id, company_id)
            if role is None:
                return Return.err(ROLE_NOT_FOUND)
            department = await self.uow.departments.get(role.department_id, company_id)
            return Return.ok(RoleResponse.from_entity(role, department))


class CreateRoleUseCase:
    """
    Business Rules:
    - The department must exist in the caller's company (DEPARTMENT_NOT_FOUND)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, command: RoleCommand) -> Result[RoleResponse]:
        async with self.uow:
            department = await self.uow.departments.get(command.department_id, company_id)
            if department is None:
                return Return.err(DEPARTMENT_NOT_FOUND)

            role = Role(
                title=command.title.strip(),
                department_id=department.id,
                responsibilities=command.responsibilities or None,
                company_id=company_id,
            )
            role = await self.uow.roles.create(role)
            await self.uow.commit()
            return Return.ok(RoleResponse.from_entity(role, department))


class UpdateRoleUseCase:
    """
    Business Rules:
    - The new department must exist in the caller's company (DEPARTMENT_NOT_FOUND)
    - A role held by employees cannot move to another department (ROLE_IN_USE)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: UUID, role_id: UUID, command: RoleCommand
    ) -> Result[RoleResponse]:
        async with self.uow:
            role = await self.uow.roles.get(role_id, company_id)
            if role is None:
                return Return.err(ROLE_NOT_FOUND)

            department = await self.uow.departments.get(command.department_id, company_id)
            if department is None:
                return Return.err(DEPARTMENT_NOT_FOUND)

            # Employees must stay in their role's department
            if department.id != role.department_id:
                employees = await self.uow.employees.list_by_role(role_id, company_id)
                if employees:
                    return Return.err(ROLE_IN_USE)

            role.title = command.title.strip()
            role.department_id = department.id
            role.responsibilities = command.responsibilities or None
            role = await self.uow.roles.update(role)
            await self.uow.commit()
            return Return.ok(RoleResponse.from_entity(role, department))


class DeleteRoleUseCase:
    """
    Business Rules:
    - A role still held by employees cannot be deleted (ROLE_IN_USE)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, role_id: UUID) -> Result[None]:
        async with self.uow:
            role = await self.uow.roles.get(role_id, company_id)
            if role is None:
                return Return.err(ROLE_NOT_FOUND)

            employees = await self.uow.employees.list_by_role(role_id, company_id)
            if employees:
                return Return.err(ROLE_IN_USE)

            await self.uow.roles.delete(role)
            await self.uow.commit()
            return Return.ok(None)
