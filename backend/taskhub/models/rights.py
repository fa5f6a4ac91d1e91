# taskhub/models/rights.py
"""
Database model for per-user rights inside a collection.
One row grants one (non-creator) user four independent permissions.
"""
from tortoise import fields, models


class UserRights(models.Model):
    """
    UserRights database model.

    Invariants:
    - At most one row per (user, collection), enforced by unique_together
    - Never created for the collection's creator (checked by the service layer)
    """
    id = fields.BigIntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="rights",
        on_delete=fields.CASCADE
    )
    collection = fields.ForeignKeyField(
        "models.Collection",
        related_name="rights",
        on_delete=fields.CASCADE
    )  # Cascade delete: rights vanish with their collection
    right_to_create = fields.BooleanField(default=False)
    right_to_edit = fields.BooleanField(default=False)
    right_to_delete = fields.BooleanField(default=False)
    right_to_change_status = fields.BooleanField(default=False)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "user_rights"
        unique_together = (("user", "collection"),)
