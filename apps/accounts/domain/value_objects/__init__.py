# Value objects
from .permission_assignment import PermissionAssignment, unique_permissions

__all__ = ['PermissionAssignment', 'unique_permissions']
