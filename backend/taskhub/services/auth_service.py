"""
Registration and login.

Passwords are hashed with passlib (Argon2); on success the caller receives
the user record and a freshly issued identity token for the session cookie.
"""
import logging
from typing import Tuple

from taskhub.core.errors import ConflictError, ForbiddenError, NotFoundError
from taskhub.core.security import TokenIssuer, hash_password, verify_password
from taskhub.domain.records import UserRecord
from taskhub.repositories.base import UserRepository

logger = logging.getLogger("uvicorn.error")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AuthService:
    def __init__(self, users: UserRepository, tokens: TokenIssuer):
        self.users = users
        self.tokens = tokens

    async def register(self, name: str, email: str, password: str) -> Tuple[UserRecord, str]:
        """
        Create an account and sign the new user in.

        Raises:
            ConflictError: The email is already registered
        """
        email = normalize_email(email)
        if await self.users.get_by_email(email):
            raise ConflictError("This email already exists")

        user = await self.users.create(name.strip(), email, hash_password(password))
        logger.info("[auth] registered user=%s", user.id)
        return user, self.tokens.issue(user.id)

    async def login(self, email: str, password: str) -> Tuple[UserRecord, str]:
        """
        Check credentials and issue a token.

        Raises:
            NotFoundError: Unknown email
            ForbiddenError: Wrong password
        """
        user = await self.users.get_by_email(normalize_email(email))
        if user is None:
            raise NotFoundError("Email not found")
        if not verify_password(password, user.password_hash):
            logger.warning("[auth] invalid password for user=%s", user.id)
            raise ForbiddenError("Invalid password")
        return user, self.tokens.issue(user.id)
