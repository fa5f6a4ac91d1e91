"""
Repository interfaces.

One interface per entity. Services depend on these, never on the ORM, and
receive concrete implementations through their constructors.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from taskhub.domain.records import (
    CollectionListItem,
    CollectionRecord,
    MemberRecord,
    Page,
    RightFlags,
    RightsRecord,
    TaskRecord,
    UserRecord,
)


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    async def create(self, name: str, email: str, password_hash: str) -> UserRecord:
        ...


class CollectionRepository(ABC):
    @abstractmethod
    async def create(self, creator_id: str, name: str) -> CollectionRecord:
        ...

    @abstractmethod
    async def get_by_id(self, collection_id: int) -> Optional[CollectionRecord]:
        ...

    @abstractmethod
    async def get_with_rights(
        self, collection_id: int, user_id: str
    ) -> Optional[Tuple[CollectionRecord, Optional[RightsRecord]]]:
        """Collection plus ``user_id``'s rights row on it (None when absent)."""

    @abstractmethod
    async def delete(self, collection_id: int) -> int:
        """Delete the collection; tasks and rights rows go with it."""

    @abstractmethod
    async def list_for_user(self, user_id: str, limit: int, page: int) -> Page[CollectionListItem]:
        """
        Collections the user created or holds a rights row on.

        Created ones first, then newest first.
        """


class RightsRepository(ABC):
    @abstractmethod
    async def upsert(self, user_id: str, collection_id: int, flags: RightFlags) -> RightsRecord:
        """Create the row or overwrite all four flags of the existing one."""

    @abstractmethod
    async def delete(self, user_id: str, collection_id: int) -> int:
        """Remove the row if present; returns the number of rows removed."""

    @abstractmethod
    async def list_members(self, collection_id: int) -> List[MemberRecord]:
        ...


class TaskRepository(ABC):
    @abstractmethod
    async def create(
        self, collection_id: int, name: str, priority: str, description: str
    ) -> TaskRecord:
        ...

    @abstractmethod
    async def list_for_collection(
        self,
        collection_id: int,
        statuses: Sequence[str],
        sort: str,
        limit: int,
        page: int,
    ) -> Page[TaskRecord]:
        """
        Tasks of a collection filtered by status.

        Ordered by status rank descending, then ``sort`` descending.
        """

    @abstractmethod
    async def delete(self, collection_id: int, task_id: int) -> int:
        ...

    @abstractmethod
    async def update(
        self,
        collection_id: int,
        task_id: int,
        name: str,
        priority: str,
        description: Optional[str] = None,
    ) -> Optional[TaskRecord]:
        """Returns None when no task matched (collection, task)."""

    @abstractmethod
    async def set_status(self, collection_id: int, task_id: int, status: str) -> Optional[TaskRecord]:
        """Returns None when no task matched (collection, task)."""
