"""
Cascading soft delete use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import StoreError
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.services.category_tree import collect_descendant_ids
from ..dtos.category_dto import CascadeDeleteResultDTO

logger = logging.getLogger(__name__)


@dataclass
class DeleteCategoryUseCase(UseCase[str, CascadeDeleteResultDTO]):
    """
    Use case for soft deleting a category and every descendant.

    Each record is marked with its own update. A failure on one member is
    recorded and the remaining members are still marked; nothing already
    marked is rolled back.
    """

    category_repository: CategoryRepository

    def execute(self, input_dto: str) -> UseCaseResult[CascadeDeleteResultDTO]:
        category_id = input_dto
        if self.category_repository.find_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

        descendant_ids = collect_descendant_ids(category_id, self.category_repository)

        affected_count = 0
        failed_ids = []
        for member_id in [category_id, *descendant_ids]:
            try:
                updated = self.category_repository.update_fields(member_id, {'deleted': True})
            except StoreError as e:
                logger.warning(f"Soft delete of category {member_id} failed: {e.message}")
                failed_ids.append(member_id)
                continue

            if updated:
                affected_count += 1
            else:
                logger.warning(f"Category {member_id} disappeared before soft delete")
                failed_ids.append(member_id)

        if affected_count == 0:
            logger.error(f"Cascade delete of category {category_id} marked no records")
            raise StoreError(
                message=f"Could not delete category '{category_id}'",
                operation='cascade_delete',
            )

        logger.info(
            f"Deleted category {category_id} with {len(descendant_ids)} descendants "
            f"({affected_count} marked, {len(failed_ids)} failed)"
        )
        return UseCaseResult.ok(CascadeDeleteResultDTO(
            category_id=category_id,
            affected_count=affected_count,
            failed_ids=failed_ids,
        ))
