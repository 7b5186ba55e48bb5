"""
Department Use Cases
"""

from .department_use_cases import (
    CreateDepartmentUseCase,
    DeleteDepartmentUseCase,
    GetDepartmentUseCase,
    ListDepartmentsUseCase,
    UpdateDepartmentUseCase,
)
from .dtos import DepartmentCommand, DepartmentResponse

__all__ = [
    "ListDepartmentsUseCase",
    "GetDepartmentUseCase",
    "CreateDepartmentUseCase",
    "UpdateDepartmentUseCase",
    "DeleteDepartmentUseCase",
    "DepartmentCommand",
    "DepartmentResponse",
]
