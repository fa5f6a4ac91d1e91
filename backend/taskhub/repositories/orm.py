# taskhub/repositories/orm.py
"""
Tortoise ORM implementations of the repository interfaces.

Every method converts ORM instances into plain records before returning, so
nothing outside this module holds a live model.
"""
from typing import List, Optional, Sequence, Tuple

from tortoise.expressions import Case, Q, When
from tortoise.query_utils import Prefetch
from tortoise.transactions import in_transaction

from taskhub.domain.records import (
    CollectionListItem,
    CollectionRecord,
    MemberRecord,
    Page,
    RightFlags,
    RightsRecord,
    TaskRecord,
    UserRecord,
    page_offset,
)
from taskhub.models import Collection, Task, TaskPriority, TaskStatus, User, UserRights
from taskhub.repositories.base import (
    CollectionRepository,
    RightsRepository,
    TaskRepository,
    UserRepository,
)

# Listing order for tasks: higher rank sorts first
STATUS_RANK = {
    TaskStatus.NEW: 1,
    TaskStatus.IN_PROCESS: 2,
    TaskStatus.COMPLETED: 3,
    TaskStatus.CANCELED: 4,
}
PRIORITY_RANK = {
    TaskPriority.LOW: 1,
    TaskPriority.MID: 2,
    TaskPriority.HIGH: 3,
}
TASK_SORT_ORDERING = {
    "createdAt": "-created_at",
    "updatedAt": "-updated_at",
    "priority": "-priority_rank",
}


def _rank(field_name: str, ranks: dict) -> Case:
    """CASE expression mapping each value of ``field_name`` to its rank."""
    return Case(*[When(**{field_name: value}, then=rank) for value, rank in ranks.items()], default=0)


def _value(enum_or_str) -> str:
    return getattr(enum_or_str, "value", enum_or_str)


def _to_user(u: User) -> UserRecord:
    return UserRecord(
        id=str(u.id),
        name=u.name,
        email=u.email,
        password_hash=u.password_hash,
        created_at=u.created_at,
        updated_at=u.updated_at,
    )


def _to_collection(c: Collection) -> CollectionRecord:
    return CollectionRecord(
        id=c.id,
        name=c.name,
        creator_id=str(c.creator_id),
        created_at=c.created_at,
        updated_at=c.updated_at,
    )


def _to_flags(r: UserRights) -> RightFlags:
    return RightFlags(
        create=r.right_to_create,
        edit=r.right_to_edit,
        delete=r.right_to_delete,
        change_status=r.right_to_change_status,
    )


def _to_rights(r: UserRights) -> RightsRecord:
    return RightsRecord(user_id=str(r.user_id), collection_id=r.collection_id, flags=_to_flags(r))


def _to_task(t: Task) -> TaskRecord:
    return TaskRecord(
        id=t.id,
        collection_id=t.collection_id,
        name=t.name,
        description=t.description or "",
        priority=_value(t.priority),
        status=_value(t.status),
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


class TortoiseUserRepository(UserRepository):
    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        u = await User.get_or_none(id=user_id)
        return _to_user(u) if u else None

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        u = await User.get_or_none(email=email)
        return _to_user(u) if u else None

    async def create(self, name: str, email: str, password_hash: str) -> UserRecord:
        u = await User.create(name=name, email=email, password_hash=password_hash)
        return _to_user(u)


class TortoiseCollectionRepository(CollectionRepository):
    async def create(self, creator_id: str, name: str) -> CollectionRecord:
        c = await Collection.create(name=name, creator_id=creator_id)
        return _to_collection(c)

    async def get_by_id(self, collection_id: int) -> Optional[CollectionRecord]:
        c = await Collection.get_or_none(id=collection_id)
        return _to_collection(c) if c else None

    async def get_with_rights(
        self, collection_id: int, user_id: str
    ) -> Optional[Tuple[CollectionRecord, Optional[RightsRecord]]]:
        c = await Collection.get_or_none(id=collection_id).prefetch_related(
            Prefetch("rights", queryset=UserRights.filter(user_id=user_id))
        )
        if c is None:
            return None
        rows = list(c.rights)
        return _to_collection(c), (_to_rights(rows[0]) if rows else None)

    async def delete(self, collection_id: int) -> int:
        # Delete tasks and rights first, then the collection (foreign keys cascade too)
        async with in_transaction():
            await Task.filter(collection_id=collection_id).delete()
            await UserRights.filter(collection_id=collection_id).delete()
            return await Collection.filter(id=collection_id).delete()

    async def list_for_user(self, user_id: str, limit: int, page: int) -> Page[CollectionListItem]:
        member_of = await UserRights.filter(user_id=user_id).values_list("collection_id", flat=True)
        condition = Q(creator_id=user_id)
        if member_of:
            condition = condition | Q(id__in=list(member_of))

        total = await Collection.filter(condition).count()
        rows = (
            await Collection.filter(condition)
            .annotate(is_creator=Case(When(creator_id=user_id, then=1), default=0))
            .order_by("-is_creator", "-created_at", "-id")
            .offset(page_offset(page, limit))
            .limit(limit)
        )

        shared_ids = [c.id for c in rows if str(c.creator_id) != str(user_id)]
        flags_by_collection = {}
        if shared_ids:
            for r in await UserRights.filter(user_id=user_id, collection_id__in=shared_ids):
                flags_by_collection[r.collection_id] = _to_flags(r)

        items = []
        for c in rows:
            creator = str(c.creator_id) == str(user_id)
            items.append(CollectionListItem(
                collection=_to_collection(c),
                is_creator=creator,
                flags=None if creator else flags_by_collection.get(c.id, RightFlags()),
            ))
        return Page(items=items, page=page, limit=limit, total=total)


class TortoiseRightsRepository(RightsRepository):
    async def upsert(self, user_id: str, collection_id: int, flags: RightFlags) -> RightsRecord:
        values = {
            "right_to_create": flags.create,
            "right_to_edit": flags.edit,
            "right_to_delete": flags.delete,
            "right_to_change_status": flags.change_status,
        }
        # get_or_create returns the existing row (without our values) when the
        # unique (user, collection) insert loses, so the flags are written here
        row, created = await UserRights.get_or_create(
            defaults=values,
            user_id=user_id,
            collection_id=collection_id,
        )
        if not created:
            for name, value in values.items():
                setattr(row, name, value)
            await row.save(update_fields=[*values, "updated_at"])
        return _to_rights(row)

    async def delete(self, user_id: str, collection_id: int) -> int:
        return await UserRights.filter(user_id=user_id, collection_id=collection_id).delete()

    async def list_members(self, collection_id: int) -> List[MemberRecord]:
        rows = (
            await UserRights.filter(collection_id=collection_id)
            .prefetch_related("user")
            .order_by("created_at", "id")
        )
        return [MemberRecord(user=_to_user(r.user), flags=_to_flags(r)) for r in rows]


class TortoiseTaskRepository(TaskRepository):
    async def create(
        self, collection_id: int, name: str, priority: str, description: str
    ) -> TaskRecord:
        t = await Task.create(
            collection_id=collection_id,
            name=name,
            priority=TaskPriority(priority),
            description=description,
            status=TaskStatus.NEW,
        )
        return _to_task(t)

    async def list_for_collection(
        self,
        collection_id: int,
        statuses: Sequence[str],
        sort: str,
        limit: int,
        page: int,
    ) -> Page[TaskRecord]:
        wanted = [TaskStatus(s) for s in statuses]
        if not wanted:
            return Page(items=[], page=page, limit=limit, total=0)
        base = Task.filter(collection_id=collection_id, status__in=wanted)
        total = await base.count()
        rows = (
            await base.annotate(
                status_rank=_rank("status", STATUS_RANK),
                priority_rank=_rank("priority", PRIORITY_RANK),
            )
            .order_by("-status_rank", TASK_SORT_ORDERING[sort], "-id")
            .offset(page_offset(page, limit))
            .limit(limit)
        )
        return Page(items=[_to_task(t) for t in rows], page=page, limit=limit, total=total)

    async def delete(self, collection_id: int, task_id: int) -> int:
        return await Task.filter(id=task_id, collection_id=collection_id).delete()

    async def update(
        self,
        collection_id: int,
        task_id: int,
        name: str,
        priority: str,
        description: Optional[str] = None,
    ) -> Optional[TaskRecord]:
        t = await Task.get_or_none(id=task_id, collection_id=collection_id)
        if t is None:
            return None
        t.name = name
        t.priority = TaskPriority(priority)
        if description is not None:
            t.description = description
        await t.save()
        return _to_task(t)

    async def set_status(self, collection_id: int, task_id: int, status: str) -> Optional[TaskRecord]:
        t = await Task.get_or_none(id=task_id, collection_id=collection_id)
        if t is None:
            return None
        t.status = TaskStatus(status)
        await t.save()
        return _to_task(t)
