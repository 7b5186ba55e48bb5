from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def create_session_token(
    user_id: UUID, email: str, role: str, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Generate a signed session token

    Args:
        user_id: User UUID
        email: User email at issuance
        role: User role (admin, manager, employee)
        expires_delta: Token lifetime, SESSION_TOKEN_EXPIRE_DAYS when omitted

    Returns:
        JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(days=ApplicationConfig.SESSION_TOKEN_EXPIRE_DAYS)
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "email": email,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_session_token(token: str) -> Optional[dict]:
    """
    Verify and decode a session token

    Bad signature, expiry and malformed input all give the same answer.

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
    except JWTError:
        return None

    if "user_id" not in payload:
        return None
    return payload
