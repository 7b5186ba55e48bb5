from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.api.schemas import Envelope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import CompanyInfo
from src.app.use_cases.companies import CompleteOnboardingUseCase
from src.depends import get_unit_of_work, get_verified_user
from src.domain.entities import User

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post(
    "/complete-onboarding",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[CompanyInfo],
    response_model_exclude_none=True,
)
async def complete_onboarding(
    current_user: User = Depends(get_verified_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Mark the caller's company onboarding as complete

    Raises:
        - 401 Unauthorized: Missing or invalid session token, or email not verified
        - 404 Not Found: Company no longer exists
    """
    use_case = CompleteOnboardingUseCase(uow)
    result = await use_case.execute(current_user.company_id)

    if result.is_err():
        error = result.error
        if error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return Envelope(message="Onboarding completed", data=result.value)
