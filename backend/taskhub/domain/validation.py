# taskhub/domain/validation.py
"""
Parsing of raw request values into domain values.

Identifiers arrive as path strings and are checked before any lookup so a
malformed id never reaches the database.
"""
import uuid
from typing import Iterable, List, Optional

from taskhub.core.errors import BadRequestError
from taskhub.models.task import TaskPriority, TaskStatus

MAX_BIGINT = 2 ** 63 - 1

# Sort keys accepted by the task listing, mapped to the ordering they stand for
TASK_SORT_FIELDS = ("createdAt", "updatedAt", "priority")

PRIORITY_VALUES = [p.value for p in TaskPriority]
STATUS_VALUES = [s.value for s in TaskStatus]


def parse_id(value, field_name: str) -> int:
    """Parse a numeric record id, e.g. ``parse_id("12", "collectionId") -> 12``."""
    if isinstance(value, bool):
        raise BadRequestError(f"'{field_name}' must be a number")
    if isinstance(value, int):
        ident = value
    else:
        # Plain ASCII digits only: no sign, whitespace, underscores or other scripts
        text = str(value) if value is not None else ""
        if not (text.isascii() and text.isdigit()):
            raise BadRequestError(f"'{field_name}' must be a number")
        ident = int(text)
    if not 0 <= ident <= MAX_BIGINT:
        raise BadRequestError(f"'{field_name}' is out of range")
    return ident


def parse_user_id(value, field_name: str = "userId") -> str:
    """Normalize a user id (UUID) to its canonical string form."""
    try:
        return str(uuid.UUID(str(value)))
    except (TypeError, ValueError):
        raise BadRequestError(f"'{field_name}' must be a valid user id")


def parse_priority(value) -> TaskPriority:
    try:
        return TaskPriority(value)
    except ValueError:
        raise BadRequestError(
            "priority must be one of the following values: " + ", ".join(PRIORITY_VALUES)
        )


def parse_status(value) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError:
        raise BadRequestError(
            "status must be one of the following values: " + ", ".join(STATUS_VALUES)
        )


def parse_statuses(values: Optional[Iterable[str]]) -> List[TaskStatus]:
    """Status filter for listings; empty or missing means every status."""
    if not values:
        return list(TaskStatus)
    statuses = []
    for value in values:
        status = parse_status(value)
        if status not in statuses:
            statuses.append(status)
    return statuses


def parse_sort(value: Optional[str]) -> str:
    if value is None:
        return "createdAt"
    if value not in TASK_SORT_FIELDS:
        raise BadRequestError(
            "sort must be one of the following values: " + ", ".join(TASK_SORT_FIELDS)
        )
    return value
