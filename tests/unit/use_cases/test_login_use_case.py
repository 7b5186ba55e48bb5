"""
Unit tests for LoginUseCase
"""
import pytest

from src.api.utils.jwt import verify_session_token
from src.app.services.passwords import hash_password
from src.app.use_cases.auth import LoginUseCase

PASSWORD = "Abcdef1!"


@pytest.fixture
def active_user(verified_user):
    verified_user.password_hash = hash_password(PASSWORD, rounds=4)
    return verified_user


@pytest.mark.asyncio
async def test_login_success(mock_uow, active_user, company):
    mock_uow.users.get_by_email.return_value = active_user
    mock_uow.companies.get_by_id.return_value = company

    result = await LoginUseCase(mock_uow).execute("admin@acme.com", PASSWORD)

    assert result.is_ok()
    data = result.value
    assert data.user.id == str(active_user.id)
    assert data.user.is_email_verified is True
    assert data.company.id == str(company.id)
    assert data.company.is_onboarding_complete is False

    payload = verify_session_token(data.token)
    assert payload["user_id"] == str(active_user.id)
    assert payload["email"] == "admin@acme.com"
    assert payload["role"] == "admin"
    # 7 day session
    assert payload["exp"] - payload["iat"] == 7 * 24 * 3600


@pytest.mark.asyncio
async def test_login_unknown_email(mock_uow):
    mock_uow.users.get_by_email.return_value = None

    result = await LoginUseCase(mock_uow).execute("nobody@acme.com", PASSWORD)

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_wrong_password_matches_unknown_email(mock_uow, active_user):
    mock_uow.users.get_by_email.return_value = active_user

    result = await LoginUseCase(mock_uow).execute("admin@acme.com", "Wrong123!")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_unverified_user(mock_uow, unverified_user):
    unverified_user.password_hash = hash_password(PASSWORD, rounds=4)
    mock_uow.users.get_by_email.return_value = unverified_user

    result = await LoginUseCase(mock_uow).execute("admin@acme.com", PASSWORD)

    assert result.is_err()
    assert result.error.code == "EMAIL_NOT_VERIFIED"


@pytest.mark.asyncio
async def test_login_unverified_checked_before_password(mock_uow, unverified_user):
    mock_uow.users.get_by_email.return_value = unverified_user

    result = await LoginUseCase(mock_uow).execute("admin@acme.com", "anything")

    assert result.error.code == "EMAIL_NOT_VERIFIED"


@pytest.mark.asyncio
async def test_login_without_password(mock_uow, verified_user):
    mock_uow.users.get_by_email.return_value = verified_user

    result = await LoginUseCase(mock_uow).execute("admin@acme.com", PASSWORD)

    assert result.is_err()
    assert result.error.code == "PASSWORD_NOT_SET"
    assert result.error.message == "Please set a password using the link sent to your email"


@pytest.mark.asyncio
async def test_login_does_not_commit(mock_uow, active_user, company):
    mock_uow.users.get_by_email.return_value = active_user
    mock_uow.companies.get_by_id.return_value = company

    await LoginUseCase(mock_uow).execute("admin@acme.com", PASSWORD)

    mock_uow.commit.assert_not_called()
