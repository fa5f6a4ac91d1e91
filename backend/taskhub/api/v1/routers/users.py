# taskhub/api/v1/routers/users.py
from fastapi import APIRouter, Depends

from taskhub.api.v1.deps import get_current_user_id, get_user_service
from taskhub.schemas.auth import UserOut
from taskhub.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me")
async def me(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
):
    """
    Get the profile of the authenticated user.

    Raises:
        401: Not authenticated
    """
    user = await service.get_profile(user_id)
    return {"user": UserOut.from_record(user)}
