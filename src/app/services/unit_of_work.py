from abc import ABC, abstractmethod

from src.app.repositories.company_repository import ICompanyRepository
from src.app.repositories.department_repository import IDepartmentRepository
from src.app.repositories.employee_repository import IEmployeeRepository
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    users: IUserRepository
    companies: ICompanyRepository
    departments: IDepartmentRepository
    roles: IRoleRepository
    employees: IEmployeeRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
