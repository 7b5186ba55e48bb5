"""
EasyHR Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user inside their company. Registration only issues admin."""

    admin = "admin"
    manager = "manager"
    employee = "employee"
