"""
Create category use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from shared.application import UseCase, UseCaseResult
from ...domain.entities.category import Category
from ...domain.exceptions import CategoryNotFoundError, InvalidCategoryError
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.value_objects.category_status import CategoryStatus
from ..dtos.category_dto import CategoryCreateDTO, CategoryDTO

logger = logging.getLogger(__name__)


# Range of the position column (a signed 32-bit integer).
MIN_POSITION = -2 ** 31
MAX_POSITION = 2 ** 31 - 1


def parse_position(raw) -> Optional[int]:
    """Read a position hint, returning None when it is not an integer."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        position = raw
    else:
        try:
            position = int(str(raw).strip())
        except ValueError:
            return None
    if not MIN_POSITION <= position <= MAX_POSITION:
        raise InvalidCategoryError(f"Position {position} is out of range", field="position")
    return position


@dataclass
class CreateCategoryUseCase(UseCase[CategoryCreateDTO, CategoryDTO]):
    """Use case for creating a category at the end of the position order."""

    category_repository: CategoryRepository

    def execute(self, input_dto: CategoryCreateDTO) -> UseCaseResult[CategoryDTO]:
        status = CategoryStatus.parse(input_dto.status)

        parent_id = input_dto.parent_id or ""
        if parent_id and self.category_repository.find_by_id(parent_id) is None:
            raise CategoryNotFoundError(parent_id)

        position = parse_position(input_dto.position)
        if position is None:
            position = self.category_repository.count() + 1

        category = Category.create(
            title=input_dto.title,
            position=position,
            parent_id=parent_id,
            description=input_dto.description,
            status=status,
        )
        saved = self.category_repository.save(category)

        logger.info(f"Created category: {saved.title} ({saved.id}) at position {saved.position}")
        return UseCaseResult.ok(CategoryDTO.from_entity(saved))
