"""
Unit tests for ResendVerificationUseCase

Tests all business logic with mocked dependencies.
"""
import pytest

from src.app.services.email_sender import EmailDeliveryError
from src.app.use_cases.auth import ResendVerificationUseCase


@pytest.mark.asyncio
async def test_resend_issues_new_token(mock_uow, email_sender, unverified_user):
    old_token = unverified_user.verification_token
    old_expiry = unverified_user.verification_token_expires_at

    use_case = ResendVerificationUseCase(mock_uow, email_sender)
    result = await use_case.execute(unverified_user)

    assert result.is_ok()
    assert result.value.email_preview is None

    updated = mock_uow.users.update.call_args[0][0]
    assert updated.verification_token != old_token
    assert updated.verification_token_expires_at >= old_expiry
    mock_uow.commit.assert_called_once()

    _, sent_token = email_sender.send_verification_email.call_args[0]
    assert sent_token == updated.verification_token


@pytest.mark.asyncio
async def test_resend_exposes_preview_when_enabled(mock_uow, email_sender, unverified_user):
    use_case = ResendVerificationUseCase(mock_uow, email_sender, expose_preview=True)
    result = await use_case.execute(unverified_user)

    assert result.value.email_preview.endswith(
        f"token={unverified_user.verification_token}"
    )


@pytest.mark.asyncio
async def test_resend_already_verified(mock_uow, email_sender, verified_user):
    result = await ResendVerificationUseCase(mock_uow, email_sender).execute(verified_user)

    assert result.is_err()
    assert result.error.code == "ALREADY_VERIFIED"
    assert result.error.message == "Email is already verified"
    mock_uow.users.update.assert_not_called()
    email_sender.send_verification_email.assert_not_called()


@pytest.mark.asyncio
async def test_resend_email_failure_fails_request(mock_uow, email_sender, unverified_user):
    email_sender.send_verification_email.side_effect = EmailDeliveryError("relay down")

    result = await ResendVerificationUseCase(mock_uow, email_sender).execute(unverified_user)

    assert result.is_err()
    assert result.error.code == "EMAIL_DELIVERY_FAILED"
    # New token is already stored
    mock_uow.commit.assert_called_once()
