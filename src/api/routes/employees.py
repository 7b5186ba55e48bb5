from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field

from src.libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.schemas import Envelope, RequiredStr
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.employees import (
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    EmployeeCommand,
    EmployeeResponse,
    GetEmployeeUseCase,
    ListEmployeesByDepartmentUseCase,
    ListEmployeesByRoleUseCase,
    ListEmployeesUseCase,
    UpdateEmployeeUseCase,
)
from src.app.use_cases.employees.employee_use_cases import (
    DEPARTMENT_NOT_FOUND,
    EMPLOYEE_NOT_FOUND,
    ROLE_NOT_FOUND,
)
from src.depends import get_unit_of_work, get_verified_user
from src.domain.base import CamelModel
from src.domain.entities import User

router = APIRouter(prefix="/employees", tags=["Employees"])

ERROR_STATUS = {
    "EMPLOYEE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DEPARTMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ROLE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ROLE_DEPARTMENT_MISMATCH": status.HTTP_400_BAD_REQUEST,
    "EMPLOYEE_EMAIL_IN_USE": status.HTTP_400_BAD_REQUEST,
}


def _raise_for(error: Error):
    if error.code in ERROR_STATUS:
        raise ClientError(error, status_code=ERROR_STATUS[error.code])
    raise ServerError(error)


def _id_or_404(value: str, error: Error):
    parsed = parse_uuid(value)
    if parsed is None:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    return parsed


class EmployeeRequest(CamelModel):
    first_name: RequiredStr = Field(..., description="First name")
    last_name: RequiredStr = Field(..., description="Last name")
    email: EmailStr = Field(..., description="Work email")
    phone: Optional[str] = None
    department: RequiredStr = Field(..., description="Department id")
    role: RequiredStr = Field(..., description="Role id")
    start_date: date = Field(..., description="First working day")

    def to_command(self) -> EmployeeCommand:
        return EmployeeCommand(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            department_id=_id_or_404(self.department, DEPARTMENT_NOT_FOUND),
            role_id=_id_or_404(self.role, ROLE_NOT_FOUND),
            start_date=self.start_date,
        )


@router.get(
    "", response_model=Envelope[List[EmployeeResponse]], response_model_exclude_none=True
)
async def list_employees(
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListEmployeesUseCase(uow).execute(current_user.company_id)
    if result.is_err():
        _raise_for(result.error)
    return Envelope(count=len(result.value), data=result.value)


@router.get(
    "/department/{department_id}",
    response_model=Envelope[List[EmployeeResponse]],
    response_model_exclude_none=True,
)
async def list_employees_by_department(
    department_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListEmployeesByDepartmentUseCase(uow).execute(
        current_user.company_id, _id_or_404(department_id, DEPARTMENT_NOT_FOUND)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(count=len(result.value), data=result.value)


@router.get(
    "/role/{role_id}",
    response_model=Envelope[List[EmployeeResponse]],
    response_model_exclude_none=True,
)
async def list_employees_by_role(
    role_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListEmployeesByRoleUseCase(uow).execute(
        current_user.company_id, _id_or_404(role_id, ROLE_NOT_FOUND)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(count=len(result.value), data=result.value)


@router.get(
    "/{employee_id}", response_model=Envelope[EmployeeResponse], response_model_exclude_none=True
)
async def get_employee(
    employee_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetEmployeeUseCase(uow).execute(
        current_user.company_id, _id_or_404(employee_id, EMPLOYEE_NOT_FOUND)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(data=result.value)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[EmployeeResponse],
    response_model_exclude_none=True,
)
async def create_employee(
    request: EmployeeRequest,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: Role outside the department, or email already used
        - 404 Not Found: Department or role unknown to this company
    """
    result = await CreateEmployeeUseCase(uow).execute(
        current_user.company_id, request.to_command()
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Employee created successfully", data=result.value)


@router.put(
    "/{employee_id}", response_model=Envelope[EmployeeResponse], response_model_exclude_none=True
)
async def update_employee(
    employee_id: str,
    request: EmployeeRequest,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateEmployeeUseCase(uow).execute(
        current_user.company_id,
        _id_or_404(employee_id, EMPLOYEE_NOT_FOUND),
        request.to_command(),
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Employee updated successfully", data=result.value)


@router.delete(
    "/{employee_id}", response_model=Envelope[None], response_model_exclude_none=True
)
async def delete_employee(
    employee_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteEmployeeUseCase(uow).execute(
        current_user.company_id, _id_or_404(employee_id, EMPLOYEE_NOT_FOUND)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Employee deleted successfully")
