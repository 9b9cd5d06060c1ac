"""
Get category tree use case.
"""
import logging
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.services.category_tree import ROOT_PARENT_KEY, build_tree
from ..dtos.category_dto import CategoryTreeDTO

logger = logging.getLogger(__name__)


@dataclass
class GetCategoryTreeUseCase(UseCase[str, List[CategoryTreeDTO]]):
    """Use case for rendering the live (non-deleted) categories as a tree."""

    category_repository: CategoryRepository

    def execute(self, input_dto: str = ROOT_PARENT_KEY) -> UseCaseResult[List[CategoryTreeDTO]]:
        categories = self.category_repository.find_all(deleted=False)
        tree = build_tree(categories, input_dto)
        logger.debug(f"Built category tree: {len(categories)} records, {len(tree)} top-level nodes")
        return UseCaseResult.ok([CategoryTreeDTO.from_node(node) for node in tree])
