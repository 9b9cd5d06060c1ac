"""
Category repository interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..entities.category import Category


class CategoryRepository(ABC):
    """Abstract repository for Category.

    ``update_fields`` and ``update_many_by_id`` raise ``StoreError`` when the
    persistence operation itself fails.
    """

    @abstractmethod
    def save(self, category: Category) -> Category:
        """Save a category."""
        pass

    @abstractmethod
    def find_by_id(self, category_id: str) -> Optional[Category]:
        """Find a category by ID, deleted or not."""
        pass

    @abstractmethod
    def find_by_parent(self, parent_id: str) -> List[Category]:
        """Find direct children of a category, deleted or not."""
        pass

    @abstractmethod
    def find_all(self, deleted: Optional[bool] = None) -> List[Category]:
        """Find all categories, optionally filtered on the soft-delete flag."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count all stored categories."""
        pass

    @abstractmethod
    def update_fields(self, category_id: str, fields: Dict[str, Any]) -> bool:
        """Update fields of one category. Returns False when no row matched."""
        pass

    @abstractmethod
    def update_many_by_id(self, category_ids: Sequence[str], fields: Dict[str, Any]) -> int:
        """Update fields of many categories. Returns the number of rows matched."""
        pass
