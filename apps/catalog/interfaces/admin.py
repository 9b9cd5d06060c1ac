"""
Catalog admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models import ProductCategoryModel, ArticleCategoryModel


class CategoryAdmin(admin.ModelAdmin):
    """Admin configuration for category tables."""
    list_display = ('title', 'parent_id', 'position', 'status', 'deleted', 'updated_at')
    list_filter = ('status', 'deleted')
    search_fields = ('title', 'id', 'parent_id')
    ordering = ('position',)
    readonly_fields = ('id', 'created_at', 'updated_at')


admin.site.register(ProductCategoryModel, CategoryAdmin)
admin.site.register(ArticleCategoryModel, CategoryAdmin)
