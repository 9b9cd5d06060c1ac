"""
Role repository interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..entities.role import Role


class RoleRepository(ABC):
    """Abstract repository for Role."""

    @abstractmethod
    def save(self, role: Role) -> Role:
        """Save a role."""
        pass

    @abstractmethod
    def find_by_id(self, role_id: str) -> Optional[Role]:
        """Find a role by ID."""
        pass

    @abstractmethod
    def find_all(self, deleted: Optional[bool] = None) -> List[Role]:
        """Find all roles, optionally filtered on the soft-delete flag."""
        pass

    @abstractmethod
    def update_fields(self, role_id: str, fields: Dict[str, Any]) -> bool:
        """Update fields of one role. Returns False when no row matched."""
        pass
