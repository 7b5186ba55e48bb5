"""
Create Password Use Case

Sets the first password of a user registered without one.
"""

from src.libs.result import Error, Result, Return
from src.app.services.passwords import hash_password, password_policy_violations
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User


class CreatePasswordUseCase:
    """
    Use case for setting a user's password.

    Business Rules:
    - Password must be 8+ chars with an uppercase letter, a digit and a
      special character (INVALID_PASSWORD otherwise)
    - Stored as a bcrypt hash, cost factor configurable (default 10)
    - Overwrites any existing password
    """

    def __init__(self, uow: UnitOfWork, bcrypt_rounds: int = 10):
        self.uow = uow
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, user: User, password: str) -> Result[None]:
        """
        Execute create password use case.

        Args:
            user: Authenticated user
            password: New plain text password

        Returns:
            Result with None, or Error(INVALID_PASSWORD)
        """
        violations = password_policy_violations(password)
        if violations:
            return Return.err(Error("INVALID_PASSWORD", violations[0]))

        async with self.uow:
            user.password_hash = hash_password(password, self.bcrypt_rounds)
            await self.uow.users.update(user)
            await self.uow.commit()

        return Return.ok(None)
