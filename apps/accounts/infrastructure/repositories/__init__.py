# Repository implementations
from .django_role_repository import DjangoRoleRepository

__all__ = ['DjangoRoleRepository']
