from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.email_sender import EmailSender, SentEmail
from src.domain.entities import Company, User, UserRole


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock())
    # create/update hand back the entity they were given
    repo.create = AsyncMock(side_effect=lambda entity: entity)
    repo.update = AsyncMock(side_effect=lambda entity: entity)
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository(
        "get_by_email", "get_by_email_excluding", "get_by_id", "get_by_verification_token"
    )
    uow.companies = _repository("get_by_id")
    uow.departments = _repository("list_by_company", "get", "delete")
    uow.roles = _repository("list_by_company", "list_by_department", "get", "delete")
    uow.employees = _repository(
        "list_by_company", "list_by_department", "list_by_role", "get", "get_by_email", "delete"
    )
    return uow


@pytest.fixture
def email_sender():
    sender = MagicMock(spec=EmailSender)
    sender.send_verification_email = AsyncMock(
        side_effect=lambda user, token: SentEmail(
            message_id="<test@easyhr.com>",
            preview_url=f"http://localhost:5173/verify-email?token={token}",
        )
    )
    return sender


@pytest.fixture
def company():
    return Company(id=uuid4(), name="Acme Corp", email="admin@acme.com")


@pytest.fixture
def unverified_user(company):
    user = User(
        id=uuid4(),
        email="admin@acme.com",
        full_name="Ada Admin",
        role=UserRole.admin,
        company_id=company.id,
        is_email_verified=False,
    )
    user.issue_verification_token(timedelta(hours=24))
    return user


@pytest.fixture
def verified_user(unverified_user):
    unverified_user.mark_email_verified()
    return unverified_user
