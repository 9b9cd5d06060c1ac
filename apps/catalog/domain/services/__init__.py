# Domain services
from .category_tree import ROOT_PARENT_KEY, build_tree, collect_descendant_ids

__all__ = ['ROOT_PARENT_KEY', 'build_tree', 'collect_descendant_ids']
