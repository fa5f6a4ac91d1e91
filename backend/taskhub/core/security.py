# taskhub/core/security.py
"""
Security module for authentication.
Handles password hashing, JWT token creation/validation, and the token
issuer the API layer uses to bind a request to a user id.
"""
import os
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext
from dotenv import load_dotenv
from pathlib import Path

from taskhub.core.errors import UnauthorizedError

# Load environment variables from project root
ENV_PATH = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

# Password hashing context
# Argon2 is a modern, secure password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

# JWT configuration
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret")  # Use a strong secret in production
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(7 * 24 * 60)))  # 7 days
JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)


def create_access_token(user_id: str, secret: str = JWT_SECRET,
                        expire_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    """
    Create a JWT access token for user authentication.

    Token payload includes:
        - sub: Subject (user ID)
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + dt.timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALG)


def decode_access_token(token: str, secret: str = JWT_SECRET) -> dict:
    """
    Decode and validate a JWT access token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(token, secret, algorithms=[JWT_ALG])


class TokenIssuer:
    """
    Issues and resolves the signed identity token carried in the session cookie.

    The rest of the application only ever sees the user id a token resolves to.
    """

    def __init__(self, secret: str = JWT_SECRET, expire_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES):
        self.secret = secret
        self.expire_minutes = expire_minutes

    @property
    def max_age_seconds(self) -> int:
        return self.expire_minutes * 60

    def issue(self, user_id: str) -> str:
        return create_access_token(user_id, secret=self.secret, expire_minutes=self.expire_minutes)

    def resolve(self, token: str) -> str:
        """Return the user id bound to ``token`` or raise UnauthorizedError."""
        try:
            payload = decode_access_token(token, secret=self.secret)
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Unauthorized")
        user_id = payload.get("sub")
        if not user_id:
            raise UnauthorizedError("Unauthorized")
        return user_id
