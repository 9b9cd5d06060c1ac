"""
Role Django ORM model.
"""
from django.db import models

from shared.domain import new_entity_id


class RoleModel(models.Model):
    """Role with its permission keys stored as a JSON list."""

    id = models.CharField(primary_key=True, max_length=32, default=new_entity_id, editable=False)
    name = models.CharField(max_length=100, db_index=True)
    description = models.TextField(blank=True, default='')
    permissions = models.JSONField(default=list, blank=True)
    deleted = models.BooleanField(default=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'roles'
        ordering = ['created_at']

    def __str__(self):
        return self.name
