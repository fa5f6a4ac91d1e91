# taskhub/repositories/__init__.py
"""
Persistence gateway: repository interfaces (base) and their Tortoise ORM
implementations (orm).
"""
from .base import CollectionRepository, RightsRepository, TaskRepository, UserRepository
from .orm import (
    TortoiseCollectionRepository,
    TortoiseRightsRepository,
    TortoiseTaskRepository,
    TortoiseUserRepository,
)
