# taskhub/models/collection.py
"""
Database model for collections.
A collection is a named container of tasks owned by the user who created it.
"""
from tortoise import fields, models


class Collection(models.Model):
    """
    Collection database model.

    Relationships:
    - Belongs to its creator (many-to-one); the creator never changes
    - Has many Tasks (via related_name="tasks"), removed with the collection
    - Has many UserRights rows (via related_name="rights"), removed with the collection
    """
    id = fields.BigIntField(pk=True)
    name = fields.CharField(max_length=50)  # Trimmed by the service before saving
    creator = fields.ForeignKeyField(
        "models.User",
        related_name="collections",
        on_delete=fields.CASCADE
    )  # Cascade delete: removing a user removes the collections they created
    created_at = fields.DatetimeField(auto_now_add=True, index=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "collections"
