"""
User profile lookups.
"""
from taskhub.core.errors import NotFoundError
from taskhub.domain.records import UserRecord
from taskhub.repositories.base import UserRepository


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    async def get_profile(self, user_id: str) -> UserRecord:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
