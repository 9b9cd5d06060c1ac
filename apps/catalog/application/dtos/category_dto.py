"""
Category DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ...domain.entities.category import Category
from ...domain.value_objects.tree_node import TreeNode


@dataclass
class CategoryCreateDTO:
    """DTO for creating a category."""
    title: str
    parent_id: Optional[str] = ""
    position: Optional[object] = None
    status: str = 'active'
    description: str = ""


@dataclass
class CategoryStatusChangeDTO:
    """DTO for changing the status of one category."""
    category_id: str
    status: str


@dataclass
class CategoriesStatusChangeDTO:
    """DTO for changing the status of many categories at once."""
    category_ids: List[str]
    status: str


@dataclass
class CategoryDTO:
    """DTO for category output."""
    id: str
    title: str
    description: str
    parent_id: str
    position: Optional[int]
    status: str
    deleted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> 'CategoryDTO':
        """Create DTO from entity."""
        return cls(
            id=category.id,
            title=category.title,
            description=category.description,
            parent_id=category.parent_id or "",
            position=category.position,
            status=category.status.value,
            deleted=category.deleted,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


@dataclass
class CategoryTreeDTO:
    """DTO for one node of the category tree."""
    id: str
    title: str
    parent_id: str
    position: Optional[int]
    status: str
    children: List['CategoryTreeDTO'] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: TreeNode) -> 'CategoryTreeDTO':
        """Convert a tree node and all of its descendants, without recursion."""
        root = cls._from_category(node.category)
        stack = [(node, root)]
        while stack:
            current, dto = stack.pop()
            for child in current.children:
                child_dto = cls._from_category(child.category)
                dto.children.append(child_dto)
                stack.append((child, child_dto))
        return root

    @classmethod
    def _from_category(cls, category: Category) -> 'CategoryTreeDTO':
        return cls(
            id=category.id,
            title=category.title,
            parent_id=category.parent_id or "",
            position=category.position,
            status=category.status.value,
        )


@dataclass
class CascadeDeleteResultDTO:
    """Outcome of a cascading soft delete."""
    category_id: str
    affected_count: int
    failed_ids: List[str] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_ids)
