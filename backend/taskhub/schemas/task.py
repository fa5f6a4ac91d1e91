# taskhub/schemas/task.py
"""
Pydantic schemas for task endpoints.
Priority and status stay plain strings here; the service validates them so
the error message names the allowed values.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from taskhub.domain.records import TaskRecord


class TaskIn(BaseModel):
    """
    Request model for creating or editing a task.
    """
    name: str = Field(min_length=1, max_length=50)
    priority: str  # low / mid / high
    description: Optional[str] = Field(default=None, max_length=500)


class TaskStatusIn(BaseModel):
    """
    Request model for the status change endpoint.
    """
    status: str  # new / in_process / completed / canceled


class TaskOut(BaseModel):
    id: int
    collectionId: int
    name: str
    description: str
    priority: str
    status: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_record(cls, task: TaskRecord) -> "TaskOut":
        return cls(
            id=task.id,
            collectionId=task.collection_id,
            name=task.name,
            description=task.description,
            priority=task.priority,
            status=task.status,
            createdAt=task.created_at,
            updatedAt=task.updated_at,
        )
