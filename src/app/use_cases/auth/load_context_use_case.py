"""
Load Context Use Case

Returns the signed-in user with their company, as cached by the frontend.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import CompanyInfo, MeResponse
from .register_dto import UserInfo


class LoadContextUseCase:
    """Use case for loading the current user and company."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user: User) -> Result[MeResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(user.company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            return Return.ok(
                MeResponse(
                    user=UserInfo.from_user(user),
                    company=CompanyInfo.from_company(company),
                )
            )
