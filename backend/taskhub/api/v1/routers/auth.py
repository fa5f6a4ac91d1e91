# taskhub/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, Response, status

from taskhub.api.v1.deps import get_auth_service, get_token_issuer
from taskhub.config import settings
from taskhub.core.security import TokenIssuer
from taskhub.schemas.auth import LoginIn, RegisterIn, UserOut
from taskhub.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def _set_session_cookie(response: Response, token: str, tokens: TokenIssuer) -> None:
    response.set_cookie(
        settings.cookie_name,
        token,
        max_age=tokens.max_age_seconds,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterIn,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    """
    Register a new user account and sign it in.

    The password is hashed before storage and the email must be unique.
    On success the access token is set as the HttpOnly "userToken" cookie.

    Returns:
        dict: {message, user: {id, name, email, createdAt, updatedAt}}

    Error codes:
        - 400: Invalid body (missing field, too long/short)
        - 409: Email already registered
    """
    user, token = await service.register(body.name, body.email, body.password)
    _set_session_cookie(response, token, tokens)
    return {"message": "User registered successfully", "user": UserOut.from_record(user)}


@router.post("/login")
async def login(
    body: LoginIn,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    """
    Authenticate with email and password.

    Error codes:
        - 404: Email not found
        - 403: Invalid password
    """
    user, token = await service.login(body.email, body.password)
    _set_session_cookie(response, token, tokens)
    return {"message": "Login successfully", "user": UserOut.from_record(user)}


@router.post("/logout")
async def logout(response: Response):
    """
    Clear the session cookie. Always succeeds, even without a cookie.

    Note:
        The JWT itself stays valid until it expires.
    """
    response.delete_cookie(settings.cookie_name, path="/")
    return {"message": "Logout successfully"}
