from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field

from src.libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.schemas import Envelope, RequiredStr
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.departments import (
    CreateDepartmentUseCase,
    DeleteDepartmentUseCase,
    DepartmentCommand,
    DepartmentResponse,
    GetDepartmentUseCase,
    ListDepartmentsUseCase,
    UpdateDepartmentUseCase,
)
from src.app.use_cases.departments.department_use_cases import DEPARTMENT_NOT_FOUND
from src.depends import get_unit_of_work, get_verified_user
from src.domain.base import CamelModel
from src.domain.entities import User

router = APIRouter(prefix="/departments", tags=["Departments"])

ERROR_STATUS = {
    "DEPARTMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DEPARTMENT_IN_USE": status.HTTP_400_BAD_REQUEST,
}


def _raise_for(error: Error):
    if error.code in ERROR_STATUS:
        raise ClientError(error, status_code=ERROR_STATUS[error.code])
    raise ServerError(error)


def _department_id(value: str):
    department_id = parse_uuid(value)
    if department_id is None:
        raise ClientError(DEPARTMENT_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return department_id


class DepartmentRequest(CamelModel):
    name: RequiredStr = Field(..., description="Department name")
    email: Optional[EmailStr] = None
    lead: Optional[str] = Field(None, max_length=255)

    def to_command(self) -> DepartmentCommand:
        return DepartmentCommand(name=self.name, email=self.email, lead=self.lead)


@router.get(
    "",
    response_model=Envelope[List[DepartmentResponse]],
    response_model_exclude_none=True,
)
async def list_departments(
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListDepartmentsUseCase(uow).execute(current_user.company_id)
    if result.is_err():
        _raise_for(result.error)
    return Envelope(count=len(result.value), data=result.value)


@router.get(
    "/{department_id}",
    response_model=Envelope[DepartmentResponse],
    response_model_exclude_none=True,
)
async def get_department(
    department_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetDepartmentUseCase(uow).execute(
        current_user.company_id, _department_id(department_id)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(data=result.value)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[DepartmentResponse],
    response_model_exclude_none=True,
)
async def create_department(
    request: DepartmentRequest,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateDepartmentUseCase(uow).execute(
        current_user.company_id, request.to_command()
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Department created successfully", data=result.value)


@router.put(
    "/{department_id}",
    response_model=Envelope[DepartmentResponse],
    response_model_exclude_none=True,
)
async def update_department(
    department_id: str,
    request: DepartmentRequest,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateDepartmentUseCase(uow).execute(
        current_user.company_id, _department_id(department_id), request.to_command()
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Department updated successfully", data=result.value)


@router.delete(
    "/{department_id}",
    response_model=Envelope[None],
    response_model_exclude_none=True,
)
async def delete_department(
    department_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: Department still has roles
        - 404 Not Found: Unknown department or another company's
    """
    result = await DeleteDepartmentUseCase(uow).execute(
        current_user.company_id, _department_id(department_id)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Department deleted successfully")
