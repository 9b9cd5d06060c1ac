# Django discovers app models here
from .infrastructure.models import RoleModel

__all__ = ['RoleModel']
