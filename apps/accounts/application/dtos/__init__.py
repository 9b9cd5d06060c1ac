# DTOs
from .role_dto import RoleCreateDTO, RoleUpdateDTO, RoleDTO, PermissionEntryResultDTO

__all__ = ['RoleCreateDTO', 'RoleUpdateDTO', 'RoleDTO', 'PermissionEntryResultDTO']
