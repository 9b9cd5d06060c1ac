"""
Category entity.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import SoftDeletableEntity
from ..exceptions import InvalidCategoryError
from ..value_objects.category_status import CategoryStatus


@dataclass(eq=False)
class Category(SoftDeletableEntity):
    """Category node stored flat, linked to its parent by id."""
    title: str = ""
    description: str = ""
    parent_id: Optional[str] = ""
    position: Optional[int] = None
    status: CategoryStatus = CategoryStatus.ACTIVE

    @classmethod
    def create(
        cls,
        title: str,
        position: int,
        parent_id: Optional[str] = "",
        description: str = "",
        status: CategoryStatus = CategoryStatus.ACTIVE,
    ) -> 'Category':
        """Factory method to create a new category."""
        if not title or not title.strip():
            raise InvalidCategoryError("Category title must not be empty", field="title")
        return cls(
            title=title.strip(),
            description=description,
            parent_id=parent_id or "",
            position=position,
            status=CategoryStatus.parse(status),
        )
