# taskhub/domain/authorization.py
"""
Rights resolution for collections and their tasks.

Decision rules:
- The creator of a collection may do anything in it.
- Anyone else needs a rights row on the collection whose flag for the
  action is set.
- Reading is weaker: under the default "membership" policy any rights row
  grants read access, whatever its flags. The "any_right" policy requires at
  least one flag to be set.

Every check returns ``Allowed`` or ``Denied``; nothing here raises for a
denial. Services turn a ``Denied`` into an error with ``raise_for_decision``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from taskhub.core.errors import BadRequestError, ForbiddenError
from taskhub.domain.records import CollectionRecord, RightsRecord


class Action(str, Enum):
    READ = "read"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    CHANGE_STATUS = "change_status"


class ReadPolicy(str, Enum):
    MEMBERSHIP = "membership"
    ANY_RIGHT = "any_right"


class DenialKind(str, Enum):
    FORBIDDEN = "forbidden"  # Caller lacks the permission
    INVALID = "invalid"      # Request targets something it must not (e.g. the creator)


@dataclass(frozen=True)
class Allowed:
    pass


@dataclass(frozen=True)
class Denied:
    reason: str
    kind: DenialKind = DenialKind.FORBIDDEN


Decision = Union[Allowed, Denied]

ALLOWED = Allowed()

DENIAL_MESSAGES = {
    Action.READ: "You don't have rights to read tasks from this collection",
    Action.CREATE: "You don't have rights to create a new task",
    Action.EDIT: "You don't have rights to edit tasks from this collection",
    Action.DELETE: "You don't have rights to delete tasks from this collection",
    Action.CHANGE_STATUS: "You don't have rights to change status of tasks from this collection",
}


def is_creator(user_id: str, collection: CollectionRecord) -> bool:
    return str(user_id) == str(collection.creator_id)


def has_flag(rights: Optional[RightsRecord], action: Action) -> bool:
    """True when ``rights`` exists and its flag for a write ``action`` is set."""
    if rights is None:
        return False
    flags = rights.flags
    return {
        Action.CREATE: flags.create,
        Action.EDIT: flags.edit,
        Action.DELETE: flags.delete,
        Action.CHANGE_STATUS: flags.change_status,
    }.get(action, False)


def can_read(rights: Optional[RightsRecord], policy: ReadPolicy = ReadPolicy.MEMBERSHIP) -> bool:
    if rights is None:
        return False
    if policy is ReadPolicy.ANY_RIGHT:
        return rights.flags.any()
    return True


def authorize(
    user_id: str,
    collection: CollectionRecord,
    rights: Optional[RightsRecord],
    action: Action,
    read_policy: ReadPolicy = ReadPolicy.MEMBERSHIP,
) -> Decision:
    """
    Decide whether ``user_id`` may perform ``action`` on ``collection``.

    Args:
        user_id: Acting user
        collection: Target collection (carries the creator id)
        rights: The acting user's rights row on that collection, if any
        action: What the user is trying to do
        read_policy: Rule applied to Action.READ for non-creators

    Returns:
        ALLOWED, or Denied with the action-specific message
    """
    if is_creator(user_id, collection):
        return ALLOWED
    if rights is not None and str(rights.user_id) != str(user_id):
        # A row belonging to somebody else never authorizes the caller
        rights = None
    if action is Action.READ:
        allowed = can_read(rights, read_policy)
    else:
        allowed = has_flag(rights, action)
    return ALLOWED if allowed else Denied(DENIAL_MESSAGES[action])


def require_creator(user_id: str, collection: CollectionRecord, reason: str) -> Decision:
    """Ownership check for operations reserved to the collection's creator."""
    return ALLOWED if is_creator(user_id, collection) else Denied(reason)


def forbid_self_target(collection: CollectionRecord, target_user_id: str, reason: str) -> Decision:
    """Rights are never granted to or removed from the creator."""
    if is_creator(target_user_id, collection):
        return Denied(reason, kind=DenialKind.INVALID)
    return ALLOWED


def raise_for_decision(decision: Decision) -> None:
    """Convert a denial into the matching domain error; no-op when allowed."""
    if isinstance(decision, Denied):
        if decision.kind is DenialKind.INVALID:
            raise BadRequestError(decision.reason)
        raise ForbiddenError(decision.reason)
