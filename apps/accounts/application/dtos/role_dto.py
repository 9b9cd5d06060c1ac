"""
Role DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ...domain.entities.role import Role


@dataclass
class RoleCreateDTO:
    """DTO for creating a role."""
    name: str
    description: str = ""
    permissions: List[str] = field(default_factory=list)


@dataclass
class RoleUpdateDTO:
    """DTO for editing a role. Fields left as None are kept."""
    role_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[str]] = None


@dataclass
class RoleDTO:
    """DTO for role output."""
    id: str
    name: str
    description: str
    permissions: List[str]
    deleted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, role: Role) -> 'RoleDTO':
        """Create DTO from entity."""
        return cls(
            id=role.id,
            name=role.name,
            description=role.description,
            permissions=list(role.permissions),
            deleted=role.deleted,
            created_at=role.created_at,
            updated_at=role.updated_at,
        )


@dataclass
class PermissionEntryResultDTO:
    """Outcome of one entry of a permission batch."""
    role_id: str
    success: bool
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, role_id: str) -> 'PermissionEntryResultDTO':
        return cls(role_id=role_id, success=True)

    @classmethod
    def fail(cls, role_id: str, error: str, error_code: str) -> 'PermissionEntryResultDTO':
        return cls(role_id=role_id, success=False, error=error, error_code=error_code)
