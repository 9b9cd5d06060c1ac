"""
Django ORM implementation of RoleRepository.
"""
from typing import Any, Dict, List, Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from shared.domain.exceptions import StoreError
from ...domain.entities.role import Role
from ...domain.repositories.role_repository import RoleRepository
from ...domain.value_objects.permission_assignment import unique_permissions
from ..models.role_model import RoleModel

UPDATABLE_FIELDS = frozenset({'name', 'description', 'permissions', 'deleted'})


class DjangoRoleRepository(RoleRepository):
    """Django ORM based role repository implementation."""

    def save(self, role: Role) -> Role:
        """Save a role entity."""
        try:
            with transaction.atomic():
                model, created = RoleModel.objects.update_or_create(
                    id=role.id,
                    defaults={
                        'name': role.name,
                        'description': role.description,
                        'permissions': list(role.permissions),
                        'deleted': role.deleted,
                    }
                )
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='save')
        return self._to_entity(model)

    def find_by_id(self, role_id: str) -> Optional[Role]:
        """Find a role by ID."""
        try:
            model = RoleModel.objects.get(id=role_id)
            return self._to_entity(model)
        except RoleModel.DoesNotExist:
            return None
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='find_by_id')

    def find_all(self, deleted: Optional[bool] = None) -> List[Role]:
        """Find all roles."""
        queryset = RoleModel.objects.all()
        if deleted is not None:
            queryset = queryset.filter(deleted=deleted)
        try:
            return [self._to_entity(model) for model in queryset]
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='find_all')

    def update_fields(self, role_id: str, fields: Dict[str, Any]) -> bool:
        """Update fields of one role."""
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update role fields: {', '.join(sorted(unknown))}")

        values = dict(fields)
        if 'permissions' in values:
            values['permissions'] = list(unique_permissions(values['permissions']))
        values['updated_at'] = timezone.now()

        try:
            updated = RoleModel.objects.filter(id=role_id).update(**values)
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='update_fields')
        return updated > 0

    def _to_entity(self, model: RoleModel) -> Role:
        """Convert Django model to domain entity."""
        return Role(
            id=model.id,
            name=model.name,
            description=model.description,
            permissions=list(model.permissions or []),
            deleted=model.deleted,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
