"""
Category Django ORM models.
"""
from django.db import models

from shared.domain import new_entity_id
from ...domain.value_objects.category_status import CategoryStatus


class BaseCategoryModel(models.Model):
    """Flat category record; the hierarchy lives in ``parent_id``."""

    id = models.CharField(primary_key=True, max_length=32, default=new_entity_id, editable=False)
    title = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default='')
    parent_id = models.CharField(max_length=32, blank=True, default='', db_index=True)
    position = models.IntegerField(null=True, blank=True)
    status = models.CharField(
        max_length=16,
        choices=CategoryStatus.choices(),
        default=CategoryStatus.ACTIVE.value,
    )
    deleted = models.BooleanField(default=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['position', 'created_at']

    def __str__(self):
        return self.title


class ProductCategoryModel(BaseCategoryModel):
    """Product category."""

    class Meta(BaseCategoryModel.Meta):
        db_table = 'products_category'
        verbose_name = 'Product category'
        verbose_name_plural = 'Product categories'
        indexes = [
            models.Index(fields=['parent_id', 'deleted'], name='prodcat_parent_deleted_idx'),
        ]


class ArticleCategoryModel(BaseCategoryModel):
    """Article (blog) category."""

    class Meta(BaseCategoryModel.Meta):
        db_table = 'articles_category'
        verbose_name = 'Article category'
        verbose_name_plural = 'Article categories'
        indexes = [
            models.Index(fields=['parent_id', 'deleted'], name='artcat_parent_deleted_idx'),
        ]
