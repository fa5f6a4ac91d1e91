# taskhub/api/v1/deps.py
"""
FastAPI dependencies: request authentication and service construction.

Services get their repositories through their constructors; these functions
are the only place that picks the concrete (Tortoise) implementations.
"""
from fastapi import Depends, Header, Request

from taskhub.config import settings
from taskhub.core.errors import BadRequestError, UnauthorizedError
from taskhub.core.security import TokenIssuer
from taskhub.domain.authorization import ReadPolicy
from taskhub.domain.validation import parse_user_id
from taskhub.repositories import (
    TortoiseCollectionRepository,
    TortoiseRightsRepository,
    TortoiseTaskRepository,
    TortoiseUserRepository,
    UserRepository,
)
from taskhub.services.auth_service import AuthService
from taskhub.services.collection_service import CollectionService
from taskhub.services.rights_service import RightsService
from taskhub.services.task_service import TaskService
from taskhub.services.user_service import UserService


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer()


def get_user_repository() -> UserRepository:
    return TortoiseUserRepository()


def get_read_policy() -> ReadPolicy:
    return ReadPolicy(settings.read_access_policy)


async def get_current_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
    tokens: TokenIssuer = Depends(get_token_issuer),
    users: UserRepository = Depends(get_user_repository),
) -> str:
    """
    Resolve the authenticated user's id.

    The token is read from:
    1. HttpOnly cookie (userToken) - what browsers send
    2. Authorization header (Bearer token) - for API clients

    Raises:
        UnauthorizedError (401): No token, invalid/expired token, or unknown user
    """
    token = request.cookies.get(settings.cookie_name)
    if not token and authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()

    if not token:
        raise UnauthorizedError("Unauthorized")

    try:
        user_id = parse_user_id(tokens.resolve(token))
    except BadRequestError:
        raise UnauthorizedError("Unauthorized")

    user = await users.get_by_id(user_id)
    if not user:
        raise UnauthorizedError("Unauthorized")
    return user.id


def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(users, tokens)


def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(users)


def get_collection_service() -> CollectionService:
    return CollectionService(TortoiseCollectionRepository())


def get_rights_service(
    users: UserRepository = Depends(get_user_repository),
    read_policy: ReadPolicy = Depends(get_read_policy),
) -> RightsService:
    return RightsService(
        TortoiseCollectionRepository(),
        TortoiseRightsRepository(),
        users,
        read_policy=read_policy,
    )


def get_task_service(read_policy: ReadPolicy = Depends(get_read_policy)) -> TaskService:
    return TaskService(TortoiseCollectionRepository(), TortoiseTaskRepository(), read_policy=read_policy)
