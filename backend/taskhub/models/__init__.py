# taskhub/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: Account and login credentials
- Collection: Named container of tasks, owned by its creator
- UserRights: Per-user permission flags inside a collection
- Task: Work item inside a collection
"""
from .user import User
from .collection import Collection
from .rights import UserRights
from .task import Task, TaskPriority, TaskStatus
