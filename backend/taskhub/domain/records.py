"""
Plain data records exchanged between repositories and services.

Services and the authorization core only ever see these, never ORM models,
so the rules can be exercised without a database.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class UserRecord:
    id: str
    name: str
    email: str
    password_hash: str = field(repr=False, default="")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class CollectionRecord:
    id: int
    name: str
    creator_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class RightFlags:
    """The four independent permissions a member can hold."""
    create: bool = False
    edit: bool = False
    delete: bool = False
    change_status: bool = False

    def any(self) -> bool:
        return self.create or self.edit or self.delete or self.change_status


@dataclass(frozen=True)
class RightsRecord:
    user_id: str
    collection_id: int
    flags: RightFlags = RightFlags()


@dataclass(frozen=True)
class MemberRecord:
    """A user holding a rights row on a collection."""
    user: UserRecord
    flags: RightFlags


@dataclass(frozen=True)
class CollectionListItem:
    collection: CollectionRecord
    is_creator: bool
    flags: Optional[RightFlags] = None  # Caller's own rights, None when creator


@dataclass(frozen=True)
class TaskRecord:
    id: int
    collection_id: int
    name: str
    description: str
    priority: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


def page_offset(page: int, limit: int) -> int:
    """Rows to skip for a 1-based page number."""
    return (page - 1) * limit
