"""
Employee Use Cases

Tenant-scoped CRUD over employees.

Business Rules (create and update):
- department must exist in the caller's company (DEPARTMENT_NOT_FOUND)
- role must exist in the caller's company (ROLE_NOT_FOUND)
- role must belong to the chosen department (ROLE_DEPARTMENT_MISMATCH)
- email must not be used by another employee of the company (EMPLOYEE_EMAIL_IN_USE)
"""

from typing import List, Optional, Tuple
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.repositories.employee_repository import DuplicateEmployeeEmailError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Department, Employee, Role, normalize_email
from .dtos import EmployeeCommand, EmployeeResponse

EMPLOYEE_NOT_FOUND = Error("EMPLOYEE_NOT_FOUND", "Employee not found")
DEPARTMENT_NOT_FOUND = Error("DEPARTMENT_NOT_FOUND", "Department not found")
ROLE_NOT_FOUND = Error("ROLE_NOT_FOUND", "Role not found")
EMPLOYEE_EMAIL_IN_USE = Error(
    "EMPLOYEE_EMAIL_IN_USE", "An employee with this email already exists"
)


async def _to_responses(
    uow: UnitOfWork, company_id: UUID, employees: List[Employee]
) -> List[EmployeeResponse]:
    departments = {d.id: d for d in await uow.departments.list_by_company(company_id)}
    roles = {r.id: r for r in await uow.roles.list_by_company(company_id)}
    return [
        EmployeeResponse.from_entity(e, departments[e.department_id], roles[e.role_id])
        for e in employees
    ]


async def _check_references(
    uow: UnitOfWork,
    company_id: UUID,
    command: EmployeeCommand,
    employee_id: Optional[UUID] = None,
) -> Result[Tuple[Department, Role]]:
    department = await uow.departments.get(command.department_id, company_id)
    if department is None:
        return Return.err(DEPARTMENT_NOT_FOUND)

    role = await uow.roles.get(command.role_id, company_id)
    if role is None:
        return Return.err(ROLE_NOT_FOUND)

    if role.department_id != department.id:
        return Return.err(
            Error(
                "ROLE_DEPARTMENT_MISMATCH",
                "Role does not belong to the selected department",
            )
        )

    existing = await uow.employees.get_by_email(
        normalize_email(command.email), company_id, exclude_id=employee_id
    )
    if existing is not None:
        return Return.err(EMPLOYEE_EMAIL_IN_USE)

    return Return.ok((department, role))


def _fields(command: EmployeeCommand) -> dict:
    return {
        "first_name": command.first_name.strip(),
        "last_name": command.last_name.strip(),
        "email": normalize_email(command.email),
        "phone": command.phone or None,
        "department_id": command.department_id,
        "role_id": command.role_id,
        "start_date": command.start_date,
    }


class ListEmployeesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID) -> Result[List[EmployeeResponse]]:
        async with self.uow:
            employees = await self.uow.employees.list_by_company(company_id)
            return Return.ok(await _to_responses(self.uow, company_id, employees))


class ListEmployeesByDepartmentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: UUID, department_id: UUID
    ) -> Result[List[EmployeeResponse]]:
        async with self.uow:
            department = await self.uow.departments.get(department_id, company_id)
            if department is None:
                return Return.err(DEPARTMENT_NOT_FOUND)

            employees = await self.uow.employees.list_by_department(department_id, company_id)
            return Return.ok(await _to_responses(self.uow, company_id, employees))


class ListEmployeesByRoleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, role_id: UUID) -> Result[List[EmployeeResponse]]:
        async with self.uow:
            role = await self.uow.roles.get(role_id, company_id)
            if role is None:
                return Return.err(ROLE_NOT_FOUND)

            employees = await self.uow.employees.list_by_role(role_id, company_id)
            return Return.ok(await _to_responses(self.uow, company_id, employees))


class GetEmployeeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, employee_id: UUID) -> Result[EmployeeResponse]:
        async with self.uow:
            employee = await self.uow.employees.get(employee_id, company_id)
            if employee is None:
                return Return.err(EMPLOYEE_NOT_FOUND)

            department = await self.uow.departments.get(employee.department_id, company_id)
            role = await self.uow.roles.get(employee.role_id, company_id)
            return Return.ok(EmployeeResponse.from_entity(employee, department, role))


class CreateEmployeeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: UUID, command: EmployeeCommand
    ) -> Result[EmployeeResponse]:
        async with self.uow:
            references = await _check_references(self.uow, company_id, command)
            if references.is_err():
                return Return.err(references.error)
            department, role = references.value

            employee = Employee(company_id=company_id, **_fields(command))
            try:
                employee = await self.uow.employees.create(employee)
                await self.uow.commit()
            except DuplicateEmployeeEmailError:
                return Return.err(EMPLOYEE_EMAIL_IN_USE)
            return Return.ok(EmployeeResponse.from_entity(employee, department, role))


class UpdateEmployeeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: UUID, employee_id: UUID, command: EmployeeCommand
    ) -> Result[EmployeeResponse]:
        async with self.uow:
            employee = await self.uow.employees.get(employee_id, company_id)
            if employee is None:
                return Return.err(EMPLOYEE_NOT_FOUND)

            references = await _check_references(
                self.uow, company_id, command, employee_id=employee_id
            )
            if references.is_err():
                return Return.err(references.error)
            department, role = references.value

            for field, value in _fields(command).items():
                setattr(employee, field, value)
            try:
                employee = await self.uow.employees.update(employee)
                await self.uow.commit()
            except DuplicateEmployeeEmailError:
                return Return.err(EMPLOYEE_EMAIL_IN_USE)
            return Return.ok(EmployeeResponse.from_entity(employee, department, role))


class DeleteEmployeeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID, employee_id: UUID) -> Result[None]:
        async with self.uow:
            employee = await self.uow.employees.get(employee_id, company_id)
            if employee is None:
                return Return.err(EMPLOYEE_NOT_FOUND)

            await self.uow.employees.delete(employee)
            await self.uow.commit()
            return Return.ok(None)
