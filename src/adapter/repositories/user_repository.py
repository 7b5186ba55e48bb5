from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import DuplicateEmailError, IUserRepository
from src.domain.entities import User, normalize_email


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (case-insensitive)"""
        stmt = select(User).where(User.email == normalize_email(email))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email_excluding(self, email: str, user_id: UUID) -> Optional[User]:
        """Get a user other than user_id owning this email"""
        stmt = select(User).where(
            User.email == normalize_email(email), User.id != user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_verification_token(self, token: str, now: datetime) -> Optional[User]:
        """Get user by verification token; expired tokens are treated as absent"""
        stmt = select(User).where(
            User.verification_token == token,
            User.verification_token_expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self._flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self._flush()
        await self.session.refresh(user)
        return user

    async def _flush(self):
        # The unique index on users.email is the backstop for two requests
        # passing the email pre-check at the same time.
        try:
            await self.session.flush()
        except IntegrityError as e:
            if "email" in str(e.orig):
                raise DuplicateEmailError(str(e.orig)) from e
            raise
