# taskhub/schemas/collection.py
"""
Pydantic schemas for collection and membership endpoints.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from taskhub.domain.records import CollectionListItem, MemberRecord, RightFlags, RightsRecord


class CollectionCreateIn(BaseModel):
    """
    Request model for creating a collection.
    """
    name: str = Field(min_length=1, max_length=50)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        # Trimmed before the length check, so a blank name is rejected
        return v.strip() if isinstance(v, str) else v


class RightsIn(BaseModel):
    """
    Request model for granting or replacing a member's rights.
    Every flag not sent is treated as False (full replace, no merge).
    """
    rightToCreate: bool = False
    rightToEdit: bool = False
    rightToDelete: bool = False
    rightToChangeStatus: bool = False

    def to_flags(self) -> RightFlags:
        return RightFlags(
            create=self.rightToCreate,
            edit=self.rightToEdit,
            delete=self.rightToDelete,
            change_status=self.rightToChangeStatus,
        )


class RightFlagsOut(BaseModel):
    """
    The caller's (or a member's) rights, named like the request fields.
    """
    rightToCreate: bool
    rightToEdit: bool
    rightToDelete: bool
    rightToChangeStatus: bool

    @classmethod
    def from_flags(cls, flags: RightFlags) -> "RightFlagsOut":
        return cls(
            rightToCreate=flags.create,
            rightToEdit=flags.edit,
            rightToDelete=flags.delete,
            rightToChangeStatus=flags.change_status,
        )


class CollectionItemOut(BaseModel):
    """
    A collection in the caller's list.
    userRights is null for collections the caller created.
    """
    id: int
    name: str
    isCreator: bool
    userRights: Optional[RightFlagsOut] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_item(cls, item: CollectionListItem) -> "CollectionItemOut":
        c = item.collection
        return cls(
            id=c.id,
            name=c.name,
            isCreator=item.is_creator,
            userRights=RightFlagsOut.from_flags(item.flags) if item.flags is not None else None,
            createdAt=c.created_at,
            updatedAt=c.updated_at,
        )


class MemberOut(BaseModel):
    """
    A user holding rights in a collection.
    """
    id: str
    name: str
    email: str
    rights: RightFlagsOut

    @classmethod
    def from_member(cls, member: MemberRecord) -> "MemberOut":
        return cls(
            id=member.user.id,
            name=member.user.name,
            email=member.user.email,
            rights=RightFlagsOut.from_flags(member.flags),
        )


def assigned_rights_out(record: RightsRecord) -> dict:
    """Body of a successful rights assignment: ``{userId, rights: {create, ...}}``."""
    return {
        "userId": record.user_id,
        "rights": {
            "create": record.flags.create,
            "edit": record.flags.edit,
            "delete": record.flags.delete,
            "changeStatus": record.flags.change_status,
        },
    }
