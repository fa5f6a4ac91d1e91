"""
Task lifecycle inside a collection.

Every operation loads the collection together with the caller's rights row
and asks the authorization core before touching a task. Status changes only
through ``change_task_status``; ``edit_task`` never modifies it.
"""
import logging
from typing import Iterable, Optional, Tuple

from taskhub.core.errors import InternalServerError, NotFoundError
from taskhub.domain.authorization import Action, ReadPolicy, authorize
from taskhub.domain.records import Page, TaskRecord
from taskhub.domain.validation import (
    parse_id,
    parse_priority,
    parse_sort,
    parse_status,
    parse_statuses,
)
from taskhub.repositories.base import CollectionRepository, TaskRepository
from taskhub.services.guard import enforce

logger = logging.getLogger("uvicorn.error")


class TaskService:
    def __init__(
        self,
        collections: CollectionRepository,
        tasks: TaskRepository,
        read_policy: ReadPolicy = ReadPolicy.MEMBERSHIP,
    ):
        self.collections = collections
        self.tasks = tasks
        self.read_policy = read_policy

    async def _authorize(self, user_id: str, collection_id: int, action: Action) -> None:
        found = await self.collections.get_with_rights(collection_id, user_id)
        if found is None:
            raise NotFoundError("Collection not found")
        collection, rights = found
        enforce(authorize(user_id, collection, rights, action, self.read_policy), user_id, collection_id)

    @staticmethod
    def _parse_ids(collection_id, task_id) -> Tuple[int, int]:
        return parse_id(collection_id, "collectionId"), parse_id(task_id, "taskId")

    async def create_task(
        self,
        user_id: str,
        collection_id,
        name: str,
        priority: str,
        description: Optional[str] = None,
    ) -> TaskRecord:
        """
        Create a task with status "new".

        Needs the create right or creatorship. Description defaults to "".
        """
        cid = parse_id(collection_id, "collectionId")
        await self._authorize(user_id, cid, Action.CREATE)
        level = parse_priority(priority)

        task = await self.tasks.create(cid, name, level.value, description or "")
        logger.info("[tasks] user=%s created task=%s in collection=%s", user_id, task.id, cid)
        return task

    async def list_tasks(
        self,
        user_id: str,
        collection_id,
        limit: int,
        page: int,
        statuses: Optional[Iterable[str]] = None,
        sort: Optional[str] = None,
    ) -> Page[TaskRecord]:
        """
        Page through the tasks of a collection.

        Args:
            statuses: Only tasks in one of these states (default: all)
            sort: Secondary ordering, one of createdAt / updatedAt / priority

        Returns:
            Page ordered by status rank (new=1 ... canceled=4) descending,
            then by ``sort`` descending
        """
        cid = parse_id(collection_id, "collectionId")
        wanted = parse_statuses(statuses)
        sort_field = parse_sort(sort)
        await self._authorize(user_id, cid, Action.READ)
        return await self.tasks.list_for_collection(
            cid, [s.value for s in wanted], sort_field, limit, page
        )

    async def delete_task(self, user_id: str, collection_id, task_id) -> None:
        """Delete a task; a task id from another collection is left alone."""
        cid, tid = self._parse_ids(collection_id, task_id)
        await self._authorize(user_id, cid, Action.DELETE)
        removed = await self.tasks.delete(cid, tid)
        logger.info("[tasks] user=%s deleted task=%s in collection=%s removed=%s", user_id, tid, cid, removed)

    async def edit_task(
        self,
        user_id: str,
        collection_id,
        task_id,
        name: str,
        priority: str,
        description: Optional[str] = None,
    ) -> TaskRecord:
        cid, tid = self._parse_ids(collection_id, task_id)
        await self._authorize(user_id, cid, Action.EDIT)
        level = parse_priority(priority)

        task = await self.tasks.update(cid, tid, name, level.value, description)
        if task is None:
            logger.error("[tasks] edit matched no row: collection=%s task=%s", cid, tid)
            raise InternalServerError("Failed to edit task")
        return task

    async def change_task_status(self, user_id: str, collection_id, task_id, status: str) -> TaskRecord:
        """Move a task to any status; no transition is off limits."""
        cid, tid = self._parse_ids(collection_id, task_id)
        await self._authorize(user_id, cid, Action.CHANGE_STATUS)
        new_status = parse_status(status)

        task = await self.tasks.set_status(cid, tid, new_status.value)
        if task is None:
            logger.error("[tasks] status change matched no row: collection=%s task=%s", cid, tid)
            raise InternalServerError("Failed to change task status")
        logger.info("[tasks] user=%s set task=%s status=%s", user_id, tid, new_status.value)
        return task
