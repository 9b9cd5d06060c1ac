"""
Category tree node value object.
"""
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from shared.domain import ValueObject
from ..entities.category import Category


@dataclass(frozen=True)
class TreeNode(ValueObject):
    """A category together with its ordered children. Built per request."""
    category: Category
    children: Tuple['TreeNode', ...] = ()

    @property
    def id(self) -> str:
        return self.category.id

    def walk(self) -> Iterator['TreeNode']:
        """Yield this node and every descendant, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def ids(self) -> List[str]:
        return [node.id for node in self.walk()]
