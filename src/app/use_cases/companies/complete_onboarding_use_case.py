"""
Complete Onboarding Use Case

Marks the company's onboarding wizard (departments, roles, employees) as done.
"""

import logging
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CompanyInfo

logger = logging.getLogger(__name__)


class CompleteOnboardingUseCase:
    """
    Business Rules:
    - is_onboarding_complete only moves from False to True
    - Calling again on a completed company succeeds without changes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID) -> Result[CompanyInfo]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            if not company.is_onboarding_complete:
                company.is_onboarding_complete = True
                company = await self.uow.companies.update(company)
                await self.uow.commit()
                logger.info(f"Company {company.id} completed onboarding")

            return Return.ok(CompanyInfo.from_company(company))
