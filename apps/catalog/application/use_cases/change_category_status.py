"""
Change category status use cases.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CategoryNotFoundError, InvalidCategoryError
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.value_objects.category_status import CategoryStatus
from ..dtos.category_dto import CategoryStatusChangeDTO, CategoriesStatusChangeDTO

logger = logging.getLogger(__name__)


@dataclass
class ChangeCategoryStatusUseCase(UseCase[CategoryStatusChangeDTO, str]):
    """Use case for changing the status of one category. Does not cascade."""

    category_repository: CategoryRepository

    def execute(self, input_dto: CategoryStatusChangeDTO) -> UseCaseResult[str]:
        status = CategoryStatus.parse(input_dto.status)

        category_id = input_dto.category_id
        if self.category_repository.find_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

        if not self.category_repository.update_fields(category_id, {'status': status.value}):
            raise CategoryNotFoundError(category_id)

        logger.info(f"Changed category {category_id} status to {status.value}")
        return UseCaseResult.ok(status.value)


@dataclass
class ChangeCategoriesStatusUseCase(UseCase[CategoriesStatusChangeDTO, int]):
    """Use case for changing the status of several categories in one update."""

    category_repository: CategoryRepository

    def execute(self, input_dto: CategoriesStatusChangeDTO) -> UseCaseResult[int]:
        status = CategoryStatus.parse(input_dto.status)

        category_ids = list(dict.fromkeys(i for i in input_dto.category_ids if i))
        if not category_ids:
            raise InvalidCategoryError("No category ids given", field="ids")

        updated = self.category_repository.update_many_by_id(category_ids, {'status': status.value})

        logger.info(f"Changed status of {updated}/{len(category_ids)} categories to {status.value}")
        return UseCaseResult.ok(updated)
