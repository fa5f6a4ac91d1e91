# taskhub/models/task.py
"""
Database model for tasks.
Tasks live inside a collection and are removed together with it.
"""
from enum import Enum
from tortoise import fields, models


class TaskPriority(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"


class TaskStatus(str, Enum):
    NEW = "new"
    IN_PROCESS = "in_process"
    COMPLETED = "completed"
    CANCELED = "canceled"


class Task(models.Model):
    """
    Task database model.

    Status starts at "new" and is only changed through the dedicated
    status-change operation, never by a generic edit.
    """
    id = fields.BigIntField(pk=True)
    collection = fields.ForeignKeyField(
        "models.Collection",
        related_name="tasks",
        on_delete=fields.CASCADE
    )
    name = fields.CharField(max_length=50)
    description = fields.CharField(max_length=500, default="")
    priority = fields.CharEnumField(TaskPriority, max_length=8, index=True)
    status = fields.CharEnumField(TaskStatus, max_length=16, default=TaskStatus.NEW, index=True)
    created_at = fields.DatetimeField(auto_now_add=True, index=True)
    updated_at = fields.DatetimeField(auto_now=True, index=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "tasks"
