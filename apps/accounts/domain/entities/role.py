"""
Role entity.
"""
from dataclasses import dataclass, field
from typing import Iterable, List

from shared.domain import SoftDeletableEntity
from ..exceptions import InvalidRoleError
from ..value_objects.permission_assignment import unique_permissions


@dataclass(eq=False)
class Role(SoftDeletableEntity):
    """Named group of permission keys."""
    name: str = ""
    description: str = ""
    permissions: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.permissions = list(unique_permissions(self.permissions))

    @classmethod
    def create(cls, name: str, description: str = "", permissions: Iterable[str] = ()) -> 'Role':
        """Factory method to create a new role."""
        if not name or not name.strip():
            raise InvalidRoleError("Role name must not be empty", field="name")
        return cls(
            name=name.strip(),
            description=description,
            permissions=list(permissions),
        )

    def replace_permissions(self, permissions: Iterable[str]) -> None:
        self.permissions = list(unique_permissions(permissions))
        self.touch()
