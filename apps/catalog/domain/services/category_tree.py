"""
Category tree construction and descendant closure.

Categories are persisted flat, each pointing at its parent by id. ``build_tree``
rebuilds the nested structure from one snapshot of that collection, and
``collect_descendant_ids`` walks the same relation level by level through a
repository for cascading writes.

Both tolerate bad data: a parent id that is not in the snapshot promotes the
record to the top level, and a parent cycle is cut at its first member (in
input order) so that every record is still emitted exactly once.
"""
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from ..entities.category import Category
from ..repositories.category_repository import CategoryRepository
from ..value_objects.tree_node import TreeNode

logger = logging.getLogger(__name__)

ROOT_PARENT_KEY = ""


def _is_root(category: Category, root_parent_key: str) -> bool:
    return not category.parent_id or category.parent_id == root_parent_key


def _find_cycle_entry(category_id: str, arena: Dict[str, Category], order: Dict[str, int]) -> str:
    """Follow parent links from an unplaced record to the cycle that hides it."""
    chain = []
    seen = set()
    current = category_id
    while current not in seen:
        seen.add(current)
        chain.append(current)
        current = arena[current].parent_id
    cycle = chain[chain.index(current):]
    return min(cycle, key=order.__getitem__)


def build_tree(categories: Sequence[Category], root_parent_key: str = ROOT_PARENT_KEY) -> List[TreeNode]:
    """
    Build a nested tree from a flat sequence of categories.

    Args:
        categories: Flat category records. No filtering is applied here.
        root_parent_key: Parent value marking a top-level record, in addition
            to an empty or missing parent id.

    Returns:
        list: Top-level TreeNodes. Siblings are ordered by ``position``
        ascending, records without a position after positioned ones, ties
        by input order.
    """
    arena: Dict[str, Category] = {}
    order: Dict[str, int] = {}
    for index, category in enumerate(categories):
        if category.id in arena:
            logger.warning(f"Duplicate category id in tree input ignored: {category.id}")
            continue
        arena[category.id] = category
        order[category.id] = index

    def sort_key(category_id: str):
        position = arena[category_id].position
        if position is None:
            return (1, 0, order[category_id])
        return (0, position, order[category_id])

    def ordered(category_ids: Iterable[str]) -> List[str]:
        return sorted(category_ids, key=sort_key)

    roots: List[str] = []
    children_index: Dict[str, List[str]] = defaultdict(list)
    for category_id, category in arena.items():
        if _is_root(category, root_parent_key) or category.parent_id not in arena:
            roots.append(category_id)
        else:
            children_index[category.parent_id].append(category_id)

    placed = set()

    def build(root_id: str) -> TreeNode:
        # Depth-first with an explicit stack; a node is assembled once all
        # of its children are.
        placed.add(root_id)
        stack = [(root_id, iter(ordered(children_index.get(root_id, ()))), [])]
        while True:
            category_id, pending, children = stack[-1]
            child_id = next(pending, None)
            if child_id is None:
                stack.pop()
                node = TreeNode(category=arena[category_id], children=tuple(children))
                if not stack:
                    return node
                stack[-1][2].append(node)
            elif child_id not in placed:
                placed.add(child_id)
                stack.append((child_id, iter(ordered(children_index.get(child_id, ()))), []))

    tree = [build(category_id) for category_id in ordered(roots)]

    # Whatever is left is only reachable through a parent cycle.
    for category_id in arena:
        if category_id in placed:
            continue
        entry_id = _find_cycle_entry(category_id, arena, order)
        logger.warning(f"Category parent cycle detected, promoting {entry_id} to top level")
        tree.append(build(entry_id))

    return tree


def collect_descendant_ids(category_id: str, repository: CategoryRepository) -> List[str]:
    """
    Compute the descendant closure of a category, breadth first.

    Children are queried one level at a time through the repository, whatever
    their soft-delete flag. The starting id is not part of the result.
    """
    visited = {category_id}
    closure: List[str] = []
    frontier = [category_id]

    while frontier:
        next_frontier = []
        for parent_id in frontier:
            for child in repository.find_by_parent(parent_id):
                if child.id in visited:
                    continue
                visited.add(child.id)
                closure.append(child.id)
                next_frontier.append(child.id)
        frontier = next_frontier

    return closure
