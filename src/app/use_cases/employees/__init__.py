"""
Employee Use Cases
"""

from .employee_use_cases import (
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    GetEmployeeUseCase,
    ListEmployeesByDepartmentUseCase,
    ListEmployeesByRoleUseCase,
    ListEmployeesUseCase,
    UpdateEmployeeUseCase,
)
from .dtos import EmployeeCommand, EmployeeResponse, RoleSummary

__all__ = [
    "ListEmployeesUseCase",
    "ListEmployeesByDepartmentUseCase",
    "ListEmployeesByRoleUseCase",
    "GetEmployeeUseCase",
    "CreateEmployeeUseCase",
    "UpdateEmployeeUseCase",
    "DeleteEmployeeUseCase",
    "EmployeeCommand",
    "EmployeeResponse",
    "RoleSummary",
]
