"""
Unit tests for VerifyEmailUseCase
"""
from datetime import datetime

import pytest

from src.api.utils.jwt import verify_session_token
from src.app.use_cases.auth import VerifyEmailUseCase


@pytest.mark.asyncio
async def test_verify_email_success(mock_uow, unverified_user):
    token = unverified_user.verification_token
    mock_uow.users.get_by_verification_token.return_value = unverified_user

    result = await VerifyEmailUseCase(mock_uow).execute(token)

    assert result.is_ok()
    assert result.value.is_email_verified is True
    assert verify_session_token(result.value.token)["user_id"] == str(unverified_user.id)

    updated = mock_uow.users.update.call_args[0][0]
    assert updated.is_email_verified is True
    assert updated.verification_token is None
    assert updated.verification_token_expires_at is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_verify_email_looks_up_live_tokens_only(mock_uow, unverified_user):
    token = unverified_user.verification_token
    mock_uow.users.get_by_verification_token.return_value = unverified_user

    await VerifyEmailUseCase(mock_uow).execute(token)

    looked_up_token, now = mock_uow.users.get_by_verification_token.call_args[0]
    assert looked_up_token == token
    assert isinstance(now, datetime)
    assert now.tzinfo is None


@pytest.mark.asyncio
async def test_verify_email_unknown_or_expired_token(mock_uow):
    mock_uow.users.get_by_verification_token.return_value = None

    result = await VerifyEmailUseCase(mock_uow).execute("no-such-token")

    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"
    assert result.error.message == "Invalid or expired verification token"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()
