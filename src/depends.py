from typing import Optional
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_session_token
from src.app.services.email_sender import EmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# auto_error=False: a missing header must produce our own 401 envelope
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_email_sender(request: Request) -> EmailSender:
    """Process-wide sender built by create_app"""
    return request.app.state.email_sender


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> User:
    """
    Dependency resolving the bearer session token into the User it names.

    Args:
        credentials: Bearer token from Authorization header
        uow: Request unit of work, shared with the route

    Returns:
        The authenticated User entity

    Raises:
        ClientError: 401 AUTHENTICATION_REQUIRED when no bearer token is sent,
            401 INVALID_TOKEN when the token is forged, expired or malformed,
            401 USER_NOT_FOUND when the user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("AUTHENTICATION_REQUIRED", "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_session_token(credentials.credentials)
    if payload is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        user_id = UUID(payload["user_id"])
    except ValueError:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    user = await uow.users.get_by_id(user_id)
    if user is None:
        raise ClientError(
            Error("USER_NOT_FOUND", "User not found"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return user


async def get_verified_user(user: User = Depends(get_current_user)) -> User:
    """
    Dependency narrowing get_current_user to users who verified their email.

    Raises:
        ClientError: 401 EMAIL_NOT_VERIFIED for a session issued before verification
    """
    if not user.is_email_verified:
        raise ClientError(
            Error("EMAIL_NOT_VERIFIED", "Please verify your email to continue"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return user
