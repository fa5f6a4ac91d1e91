# taskhub/models/user.py
"""
Database model for users.
Represents a registered account: display name, login email and the password hash.
"""
import uuid
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Collections as their creator (via related_name="collections")
    - Has many UserRights rows as a grantee (via related_name="rights")

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email must be unique across all users (it is the login name)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    name = fields.CharField(max_length=128)  # Display name
    email = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login email (unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never plain text
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"
