from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.company_repository import CompanyRepository
from src.adapter.repositories.department_repository import DepartmentRepository
from src.adapter.repositories.employee_repository import EmployeeRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session
        # Repositories are usable outside the context manager too, for the
        # read-only lookups done by request dependencies (current user).
        self._init_repositories()

    def _init_repositories(self):
        self.users = UserRepository(self.session)
        self.companies = CompanyRepository(self.session)
        self.departments = DepartmentRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.employees = EmployeeRepository(self.session)

    async def __aenter__(self):
        self._init_repositories()
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
