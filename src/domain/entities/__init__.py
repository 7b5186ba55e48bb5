"""
EasyHR Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import UserRole

from .company import Company
from .user import User, normalize_email
from .department import Department
from .role import Role
from .employee import Employee

__all__ = [
    # Enums
    "UserRole",
    # Entities
    "Company",
    "User",
    "Department",
    "Role",
    "Employee",
    # Helpers
    "normalize_email",
]
