"""
Restore category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


@dataclass
class RestoreCategoryUseCase(UseCase[str, str]):
    """Use case for clearing the deleted flag of a single category.

    Descendants removed by the same cascade stay deleted.
    """

    category_repository: CategoryRepository

    def execute(self, input_dto: str) -> UseCaseResult[str]:
        category_id = input_dto
        if self.category_repository.find_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

        if not self.category_repository.update_fields(category_id, {'deleted': False}):
            raise CategoryNotFoundError(category_id)

        logger.info(f"Restored category: {category_id}")
        return UseCaseResult.ok(category_id)
