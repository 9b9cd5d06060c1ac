"""
Django ORM implementation of CategoryRepository.
"""
from typing import Any, Dict, List, Optional, Sequence, Type

from django.db import DatabaseError, transaction
from django.utils import timezone

from shared.domain.exceptions import StoreError
from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.value_objects.category_status import CategoryStatus
from ..models.category_model import BaseCategoryModel, ProductCategoryModel

UPDATABLE_FIELDS = frozenset({'title', 'description', 'parent_id', 'position', 'status', 'deleted'})


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM based category repository, bound to one category table."""

    def __init__(self, model_class: Type[BaseCategoryModel] = ProductCategoryModel):
        self.model_class = model_class

    def save(self, category: Category) -> Category:
        """Save a category entity."""
        try:
            with transaction.atomic():
                model, created = self.model_class.objects.update_or_create(
                    id=category.id,
                    defaults={
                        'title': category.title,
                        'description': category.description,
                        'parent_id': category.parent_id or '',
                        'position': category.position,
                        'status': category.status.value,
                        'deleted': category.deleted,
                    }
                )
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='save')
        return self._to_entity(model)

    def find_by_id(self, category_id: str) -> Optional[Category]:
        """Find a category by ID."""
        try:
            model = self.model_class.objects.get(id=category_id)
            return self._to_entity(model)
        except self.model_class.DoesNotExist:
            return None
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='find_by_id')

    def find_by_parent(self, parent_id: str) -> List[Category]:
        """Find direct children of a category."""
        try:
            return [self._to_entity(model) for model in self.model_class.objects.filter(parent_id=parent_id)]
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='find_by_parent')

    def find_all(self, deleted: Optional[bool] = None) -> List[Category]:
        """Find all categories."""
        queryset = self.model_class.objects.all()
        if deleted is not None:
            queryset = queryset.filter(deleted=deleted)
        try:
            return [self._to_entity(model) for model in queryset]
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='find_all')

    def count(self) -> int:
        """Count all categories."""
        try:
            return self.model_class.objects.count()
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='count')

    def update_fields(self, category_id: str, fields: Dict[str, Any]) -> bool:
        """Update fields of one category."""
        values = self._clean_fields(fields)
        try:
            updated = self.model_class.objects.filter(id=category_id).update(**values)
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='update_fields')
        return updated > 0

    def update_many_by_id(self, category_ids: Sequence[str], fields: Dict[str, Any]) -> int:
        """Update fields of many categories."""
        values = self._clean_fields(fields)
        try:
            return self.model_class.objects.filter(id__in=list(category_ids)).update(**values)
        except DatabaseError as e:
            raise StoreError(message=str(e), operation='update_many_by_id')

    def _clean_fields(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update category fields: {', '.join(sorted(unknown))}")
        values = dict(fields)
        if isinstance(values.get('status'), CategoryStatus):
            values['status'] = values['status'].value
        # QuerySet.update() skips auto_now
        values['updated_at'] = timezone.now()
        return values

    def _to_entity(self, model: BaseCategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category(
            id=model.id,
            title=model.title,
            description=model.description,
            parent_id=model.parent_id,
            position=model.position,
            status=CategoryStatus(model.status),
            deleted=model.deleted,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
