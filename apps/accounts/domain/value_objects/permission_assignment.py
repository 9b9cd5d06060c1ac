"""
Permission assignment value object.
"""
from dataclasses import dataclass
from typing import Iterable, Tuple

from shared.domain import ValueObject


def unique_permissions(permissions: Iterable[str]) -> Tuple[str, ...]:
    """Drop duplicate permission keys, keeping first occurrence order."""
    return tuple(dict.fromkeys(permissions))


@dataclass(frozen=True)
class PermissionAssignment(ValueObject):
    """Full replacement of one role's permission set."""
    role_id: str
    permissions: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'permissions', unique_permissions(self.permissions))
