"""
Unit tests for RegisterUseCase

Tests all business logic with mocked dependencies.
"""
from datetime import timedelta

import pytest

from src.api.utils.jwt import verify_session_token
from src.app.repositories.user_repository import DuplicateEmailError
from src.app.services.email_sender import EmailDeliveryError
from src.app.use_cases.auth import RegisterCommand, RegisterUseCase
from src.domain.base import utcnow
from src.domain.entities import User


def make_command(**overrides) -> RegisterCommand:
    fields = {
        "email": "  Admin@Acme.COM ",
        "full_name": "Ada Admin",
        "company_name": "Acme Corp",
        "phone": "+1 555 0100",
        "company_identifier": "ACME-001",
        "employee_count": "11-50",
        "job_title": "CEO",
    }
    fields.update(overrides)
    return RegisterCommand(**fields)


@pytest.mark.asyncio
async def test_register_creates_company_and_unverified_admin(mock_uow, email_sender):
    mock_uow.users.get_by_email.return_value = None

    use_case = RegisterUseCase(mock_uow, email_sender)
    result = await use_case.execute(make_command())

    assert result.is_ok()
    data = result.value
    assert data.user.email == "admin@acme.com"
    assert data.user.full_name == "Ada Admin"
    assert data.user.role == "admin"
    assert data.user.is_email_verified is False
    assert data.company.name == "Acme Corp"
    assert data.company.email == "admin@acme.com"
    assert data.email_sent is True
    assert data.email_preview is None

    company = mock_uow.companies.create.call_args[0][0]
    assert company.company_identifier == "ACME-001"
    assert company.employee_count == "11-50"
    assert company.is_onboarding_complete is False

    user = mock_uow.users.create.call_args[0][0]
    assert user.company_id == company.id
    assert user.password_hash is None
    assert user.job_title == "CEO"
    assert user.verification_token is not None

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_register_token_expires_in_24_hours(mock_uow, email_sender):
    mock_uow.users.get_by_email.return_value = None
    before = utcnow()

    result = await RegisterUseCase(mock_uow, email_sender).execute(make_command())

    assert result.is_ok()
    user = mock_uow.users.create.call_args[0][0]
    expires_at = user.verification_token_expires_at
    assert before + timedelta(hours=23, minutes=59) < expires_at
    assert expires_at <= utcnow() + timedelta(hours=24)


@pytest.mark.asyncio
async def test_register_sends_email_with_stored_token(mock_uow, email_sender):
    mock_uow.users.get_by_email.return_value = None

    await RegisterUseCase(mock_uow, email_sender).execute(make_command())

    user = mock_uow.users.create.call_args[0][0]
    email_sender.send_verification_email.assert_awaited_once()
    sent_user, sent_token = email_sender.send_verification_email.call_args[0]
    assert sent_user is user
    assert sent_token == user.verification_token


@pytest.mark.asyncio
async def test_register_returns_session_token_for_new_admin(mock_uow, email_sender):
    mock_uow.users.get_by_email.return_value = None

    result = await RegisterUseCase(mock_uow, email_sender).execute(make_command())

    payload = verify_session_token(result.value.token)
    assert payload is not None
    assert payload["user_id"] == result.value.user.id
    assert payload["email"] == "admin@acme.com"
    assert payload["role"] == "admin"


@pytest.mark.asyncio
async def test_register_exposes_preview_when_enabled(mock_uow, email_sender):
    mock_uow.users.get_by_email.return_value = None

    use_case = RegisterUseCase(mock_uow, email_sender, expose_preview=True)
    result = await use_case.execute(make_command())

    user = mock_uow.users.create.call_args[0][0]
    assert result.value.email_preview.endswith(f"token={user.verification_token}")


@pytest.mark.asyncio
async def test_register_rejects_existing_email(mock_uow, email_sender, verified_user):
    mock_uow.users.get_by_email.return_value = verified_user

    result = await RegisterUseCase(mock_uow, email_sender).execute(make_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_REGISTERED"
    assert result.error.message == "Email is already registered"
    mock_uow.companies.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    email_sender.send_verification_email.assert_not_called()


@pytest.mark.asyncio
async def test_register_existing_email_lookup_is_normalized(mock_uow, email_sender):
    mock_uow.users.get_by_email.return_value = None

    await RegisterUseCase(mock_uow, email_sender).execute(make_command())

    mock_uow.users.get_by_email.assert_awaited_once_with("admin@acme.com")


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["email", "full_name", "company_name"])
async def test_register_rejects_blank_required_field(mock_uow, email_sender, field):
    result = await RegisterUseCase(mock_uow, email_sender).execute(
        make_command(**{field: "   "})
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_register_concurrent_duplicate_is_reported(mock_uow, email_sender):
    """The unique index catches a duplicate created after the lookup"""
    mock_uow.users.get_by_email.return_value = None
    mock_uow.users.create.side_effect = DuplicateEmailError("users.email")

    result = await RegisterUseCase(mock_uow, email_sender).execute(make_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_REGISTERED"
    mock_uow.commit.assert_not_called()
    email_sender.send_verification_email.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "failure", [EmailDeliveryError("relay down"), RuntimeError("template missing")]
)
async def test_register_survives_email_failure(mock_uow, email_sender, failure):
    mock_uow.users.get_by_email.return_value = None
    email_sender.send_verification_email.side_effect = failure

    result = await RegisterUseCase(mock_uow, email_sender, expose_preview=True).execute(
        make_command()
    )

    assert result.is_ok()
    assert result.value.email_sent is False
    assert result.value.email_preview is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_register_response_hides_email_sent_flag(mock_uow, email_sender):
    mock_uow.users.get_by_email.return_value = None

    result = await RegisterUseCase(mock_uow, email_sender).execute(make_command())

    dumped = result.value.model_dump(by_alias=True)
    assert "emailSent" not in dumped
    assert "email_sent" not in dumped
    assert dumped["user"]["isEmailVerified"] is False
    assert isinstance(mock_uow.users.create.call_args[0][0], User)
