from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import Field

from src.libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.schemas import Envelope, RequiredStr
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.roles import (
    CreateRoleUseCase,
    DeleteRoleUseCase,
    GetRoleUseCase,
    ListRolesByDepartmentUseCase,
    ListRolesUseCase,
    RoleCommand,
    RoleResponse,
    UpdateRoleUseCase,
)
from src.app.use_cases.roles.role_use_cases import DEPARTMENT_NOT_FOUND, ROLE_NOT_FOUND
from src.depends import get_unit_of_work, get_verified_user
from src.domain.base import CamelModel
from src.domain.entities import User

router = APIRouter(prefix="/roles", tags=["Roles"])

ERROR_STATUS = {
    "ROLE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DEPARTMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ROLE_IN_USE": status.HTTP_400_BAD_REQUEST,
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


class RoleRequest(CamelModel):
    title: RequiredStr = Field(..., description="Role title")
    department: RequiredStr = Field(..., description="Department id")
    responsibilities: Optional[str] = None

    def to_command(self) -> RoleCommand:
        return RoleCommand(
            title=self.title,
            department_id=_id_or_404(self.department, DEPARTMENT_NOT_FOUND),
            responsibilities=self.responsibilities,
        )


@router.get("", response_model=Envelope[List[RoleResponse]], response_model_exclude_none=True)
async def list_roles(
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListRolesUseCase(uow).execute(current_user.company_id)
    if result.is_err():
        _raise_for(result.error)
    return Envelope(count=len(result.value), data=result.value)


@router.get(
    "/department/{department_id}",
    response_model=Envelope[List[RoleResponse]],
    response_model_exclude_none=True,
)
async def list_roles_by_department(
    department_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListRolesByDepartmentUseCase(uow).execute(
        current_user.company_id, _id_or_404(department_id, DEPARTMENT_NOT_FOUND)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(count=len(result.value), data=result.value)


@router.get("/{role_id}", response_model=Envelope[RoleResponse], response_model_exclude_none=True)
async def get_role(
    role_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetRoleUseCase(uow).execute(
        current_user.company_id, _id_or_404(role_id, ROLE_NOT_FOUND)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(data=result.value)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[RoleResponse],
    response_model_exclude_none=True,
)
async def create_role(
    request: RoleRequest,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Department is unknown or belongs to another company
    """
    result = await CreateRoleUseCase(uow).execute(current_user.company_id, request.to_command())
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Role created successfully", data=result.value)


@router.put("/{role_id}", response_model=Envelope[RoleResponse], response_model_exclude_none=True)
async def update_role(
    role_id: str,
    request: RoleRequest,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateRoleUseCase(uow).execute(
        current_user.company_id, _id_or_404(role_id, ROLE_NOT_FOUND), request.to_command()
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Role updated successfully", data=result.value)


@router.delete("/{role_id}", response_model=Envelope[None], response_model_exclude_none=True)
async def delete_role(
    role_id: str,
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: Employees still hold this role
        - 404 Not Found: Unknown role or another company's
    """
    result = await DeleteRoleUseCase(uow).execute(
        current_user.company_id, _id_or_404(role_id, ROLE_NOT_FOUND)
    )
    if result.is_err():
        _raise_for(result.error)
    return Envelope(message="Role deleted successfully")
