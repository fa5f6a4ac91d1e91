"""
Services Module

Application services, one per use-case family:
- AuthService: registration and login
- UserService: profile lookups
- CollectionService: create / list / delete collections
- RightsService: collection members and their rights
- TaskService: task lifecycle inside a collection
"""
from .auth_service import AuthService
from .user_service import UserService
from .collection_service import CollectionService
from .rights_service import RightsService
from .task_service import TaskService

__all__ = [
    "AuthService",
    "UserService",
    "CollectionService",
    "RightsService",
    "TaskService",
]
