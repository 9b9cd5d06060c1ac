# Use cases
from .apply_permission_batch import ApplyPermissionBatchUseCase
from .create_role import CreateRoleUseCase
from .get_role import GetRoleUseCase
from .update_role import UpdateRoleUseCase

__all__ = ['ApplyPermissionBatchUseCase', 'CreateRoleUseCase', 'GetRoleUseCase', 'UpdateRoleUseCase']
