from datetime import timedelta
from uuid import uuid4

from jose import jwt

from config import ApplicationConfig
from src.api.utils.jwt import create_session_token, verify_session_token


def test_session_token_round_trip():
    user_id = uuid4()
    token = create_session_token(user_id, "admin@acme.com", "admin")

    payload = verify_session_token(token)

    assert payload["user_id"] == str(user_id)
    assert payload["email"] == "admin@acme.com"
    assert payload["role"] == "admin"


def test_expired_session_token_is_rejected():
    token = create_session_token(uuid4(), "admin@acme.com", "admin", timedelta(seconds=-1))

    assert verify_session_token(token) is None


def test_session_token_signed_with_other_secret_is_rejected():
    token = jwt.encode(
        {"user_id": str(uuid4()), "email": "x@acme.com", "role": "admin"},
        "some-other-secret",
        algorithm=ApplicationConfig.JWT_ALGORITHM,
    )

    assert verify_session_token(token) is None


def test_garbage_session_token_is_rejected():
    assert verify_session_token("not.a.jwt") is None


def test_session_token_without_user_id_is_rejected():
    token = jwt.encode(
        {"email": "x@acme.com", "role": "admin"},
        ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
    )

    assert verify_session_token(token) is None
