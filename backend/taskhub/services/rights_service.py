"""
Rights lifecycle inside a collection: who is a member and what they may do.

Only the creator manages members. The creator never gets a rights row of
their own, they are authorized implicitly.
"""
import logging
from typing import List

from taskhub.core.errors import NotFoundError
from taskhub.domain.authorization import (
    Action,
    ReadPolicy,
    authorize,
    forbid_self_target,
    require_creator,
)
from taskhub.domain.records import CollectionRecord, MemberRecord, RightFlags, RightsRecord
from taskhub.domain.validation import parse_id, parse_user_id
from taskhub.repositories.base import CollectionRepository, RightsRepository, UserRepository
from taskhub.services.guard import enforce

logger = logging.getLogger("uvicorn.error")


class RightsService:
    def __init__(
        self,
        collections: CollectionRepository,
        rights: RightsRepository,
        users: UserRepository,
        read_policy: ReadPolicy = ReadPolicy.MEMBERSHIP,
    ):
        self.collections = collections
        self.rights = rights
        self.users = users
        self.read_policy = read_policy

    async def _load_collection(self, collection_id: int) -> CollectionRecord:
        collection = await self.collections.get_by_id(collection_id)
        if collection is None:
            raise NotFoundError("Collection not found")
        return collection

    async def list_members(self, user_id: str, collection_id) -> List[MemberRecord]:
        """Users holding a rights row on the collection; needs read access."""
        cid = parse_id(collection_id, "collectionId")
        found = await self.collections.get_with_rights(cid, user_id)
        if found is None:
            raise NotFoundError("Collection not found")
        collection, own_rights = found
        enforce(authorize(user_id, collection, own_rights, Action.READ, self.read_policy), user_id, cid)
        return await self.rights.list_members(cid)

    async def assign_rights(
        self,
        requesting_user_id: str,
        target_user_id,
        collection_id,
        flags: RightFlags,
    ) -> RightsRecord:
        """
        Add a user to a collection or replace their rights.

        All four flags are written every time: a flag left out of the request
        arrives here as False and clears a previously granted right.

        Raises:
            BadRequestError: Malformed ids, or the target is the creator
            NotFoundError: Collection or target user does not exist
            ForbiddenError: Caller is not the creator
        """
        cid = parse_id(collection_id, "collectionId")
        target = parse_user_id(target_user_id)
        collection = await self._load_collection(cid)

        enforce(
            require_creator(requesting_user_id, collection, "Only the creator can add users to this collection"),
            requesting_user_id, cid,
        )
        enforce(
            forbid_self_target(collection, target, "You cannot set rights for yourself"),
            requesting_user_id, cid,
        )
        if await self.users.get_by_id(target) is None:
            raise NotFoundError("User not found")

        record = await self.rights.upsert(target, cid, flags)
        logger.info("[rights] collection=%s user=%s flags=%s", cid, target, flags)
        return record

    async def remove_user(self, requesting_user_id: str, target_user_id, collection_id) -> None:
        """Drop a member's rights row; removing a non-member is a no-op."""
        cid = parse_id(collection_id, "collectionId")
        target = parse_user_id(target_user_id)
        collection = await self._load_collection(cid)

        enforce(
            require_creator(requesting_user_id, collection, "Only the creator can remove users from this collection"),
            requesting_user_id, cid,
        )
        enforce(
            forbid_self_target(
                collection, target,
                "You cannot remove yourself from this collection, you are the creator of this collection",
            ),
            requesting_user_id, cid,
        )

        removed = await self.rights.delete(target, cid)
        logger.info("[rights] collection=%s user=%s removed=%s", cid, target, removed)
