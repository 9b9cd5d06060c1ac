# Serializers
from .role_serializer import (
    RoleSerializer,
    RoleCreateSerializer,
    RoleUpdateSerializer,
    PermissionBatchSerializer,
    PermissionEntryResultSerializer,
    PermissionBatchResultSerializer,
)

__all__ = [
    'RoleSerializer',
    'RoleCreateSerializer',
    'RoleUpdateSerializer',
    'PermissionBatchSerializer',
    'PermissionEntryResultSerializer',
    'PermissionBatchResultSerializer',
]
