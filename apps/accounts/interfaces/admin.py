"""
Accounts admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models import RoleModel


@admin.register(RoleModel)
class RoleAdmin(admin.ModelAdmin):
    """Admin configuration for Role model."""
    list_display = ('name', 'description', 'deleted', 'created_at')
    list_filter = ('deleted',)
    search_fields = ('name', 'id')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
