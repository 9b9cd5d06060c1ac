# Django models
from .role_model import RoleModel

__all__ = ['RoleModel']
