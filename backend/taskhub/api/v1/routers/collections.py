# taskhub/api/v1/routers/collections.py
from fastapi import APIRouter, Depends, Query, status

from taskhub.api.v1.deps import get_collection_service, get_current_user_id, get_rights_service
from taskhub.schemas.collection import (
    CollectionCreateIn,
    CollectionItemOut,
    MemberOut,
    RightsIn,
    assigned_rights_out,
)
from taskhub.services.collection_service import CollectionService
from taskhub.services.rights_service import RightsService

router = APIRouter(prefix="/collections", tags=["collections"])


# ===== Collections =====
@router.post("", status_code=status.HTTP_201_CREATED)
async def create_collection(
    body: CollectionCreateIn,
    user_id: str = Depends(get_current_user_id),
    service: CollectionService = Depends(get_collection_service),
):
    """
    Create a new collection owned by the authenticated user.

    Returns:
        dict: {message, collection: {id}}
    """
    collection = await service.create_collection(user_id, body.name)
    return {"message": "Collection was created successfully", "collection": {"id": collection.id}}


@router.get("")
async def list_collections(
    user_id: str = Depends(get_current_user_id),
    service: CollectionService = Depends(get_collection_service),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
):
    """
    Collections the user created or was added to.

    Created collections come first, then newest first. Each item carries
    isCreator and, for shared collections, the caller's own rights.

    Returns:
        dict: {page, totalPages, collections: [...]}
    """
    result = await service.list_user_collections(user_id, limit, page)
    return {
        "page": result.page,
        "totalPages": result.total_pages,
        "collections": [CollectionItemOut.from_item(item) for item in result.items],
    }


@router.delete("/{collection_id}")
async def delete_collection(
    collection_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CollectionService = Depends(get_collection_service),
):
    """
    Delete a collection with all its tasks and rights. Creator only.

    Error codes:
        - 400: collectionId is not a number
        - 403: Caller is not the creator
        - 404: Collection not found
    """
    await service.delete_collection(user_id, collection_id)
    return {"message": "Collection was deleted successfully"}


# ===== Members & rights =====
@router.get("/{collection_id}/users")
async def list_collection_users(
    collection_id: str,
    user_id: str = Depends(get_current_user_id),
    service: RightsService = Depends(get_rights_service),
):
    """
    Users who hold rights in this collection. Visible to the creator and members.
    """
    members = await service.list_members(user_id, collection_id)
    return {"users": [MemberOut.from_member(m) for m in members]}


@router.patch("/{collection_id}/users/{target_user_id}")
async def set_user_rights(
    collection_id: str,
    target_user_id: str,
    body: RightsIn,
    user_id: str = Depends(get_current_user_id),
    service: RightsService = Depends(get_rights_service),
):
    """
    Add a user to the collection or replace their rights. Creator only.

    All four flags are replaced; flags missing from the body are set to false.

    Error codes:
        - 400: Malformed id, or the creator targets themselves
        - 403: Caller is not the creator
        - 404: Collection or user not found
    """
    record = await service.assign_rights(user_id, target_user_id, collection_id, body.to_flags())
    return {"message": "Set user rights successfully", "user": assigned_rights_out(record)}


@router.delete("/{collection_id}/users/{target_user_id}")
async def remove_user(
    collection_id: str,
    target_user_id: str,
    user_id: str = Depends(get_current_user_id),
    service: RightsService = Depends(get_rights_service),
):
    """
    Remove a user's rights from the collection. Creator only; idempotent.
    """
    await service.remove_user(user_id, target_user_id, collection_id)
    return {"message": "User successfully removed from collection"}
