"""
Role Use Cases
"""

from .role_use_cases import (
    CreateRoleUseCase,
    DeleteRoleUseCase,
    GetRoleUseCase,
    ListRolesByDepartmentUseCase,
    ListRolesUseCase,
    UpdateRoleUseCase,
)
from .dtos import DepartmentSummary, RoleCommand, RoleResponse

__all__ = [
    "ListRolesUseCase",
    "ListRolesByDepartmentUseCase",
    "GetRoleUseCase",
    "CreateRoleUseCase",
    "UpdateRoleUseCase",
    "DeleteRoleUseCase",
    "RoleCommand",
    "RoleResponse",
    "DepartmentSummary",
]
