"""
Collection lifecycle: create, list and delete collections.
"""
import logging

from taskhub.core.errors import BadRequestError, NotFoundError
from taskhub.domain.authorization import require_creator
from taskhub.domain.records import CollectionListItem, CollectionRecord, Page
from taskhub.domain.validation import parse_id
from taskhub.repositories.base import CollectionRepository
from taskhub.services.guard import enforce

logger = logging.getLogger("uvicorn.error")


class CollectionService:
    """Creating, listing and deleting collections."""

    def __init__(self, collections: CollectionRepository):
        self.collections = collections

    async def create_collection(self, user_id: str, name: str) -> CollectionRecord:
        """
        Create a collection owned by ``user_id``.

        Any authenticated user may create collections; the name is stored trimmed.
        """
        name = (name or "").strip()
        if not name:
            raise BadRequestError("name must not be empty")
        collection = await self.collections.create(user_id, name)
        logger.info("[collections] user=%s created collection=%s", user_id, collection.id)
        return collection

    async def list_user_collections(self, user_id: str, limit: int, page: int) -> Page[CollectionListItem]:
        """Collections the user created or was added to, created ones first."""
        return await self.collections.list_for_user(user_id, limit, page)

    async def delete_collection(self, user_id: str, collection_id) -> None:
        """
        Delete a collection together with its tasks and rights rows.

        Raises:
            BadRequestError: ``collection_id`` is not numeric
            NotFoundError: No such collection
            ForbiddenError: Caller is not the creator
        """
        cid = parse_id(collection_id, "collectionId")
        collection = await self.collections.get_by_id(cid)
        if collection is None:
            raise NotFoundError("Collection not found")

        enforce(require_creator(user_id, collection, "Only the creator can delete the collection"), user_id, cid)

        await self.collections.delete(cid)
        logger.info("[collections] user=%s deleted collection=%s", user_id, cid)
