"""
Update role use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import InvalidRoleError, RoleNotFoundError
from ...domain.repositories.role_repository import RoleRepository
from ..dtos.role_dto import RoleDTO, RoleUpdateDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateRoleUseCase(UseCase[RoleUpdateDTO, RoleDTO]):
    """Use case for editing the name, description or permissions of a role."""

    role_repository: RoleRepository

    def execute(self, input_dto: RoleUpdateDTO) -> UseCaseResult[RoleDTO]:
        role = self.role_repository.find_by_id(input_dto.role_id)
        if role is None or role.deleted:
            raise RoleNotFoundError(input_dto.role_id)

        if input_dto.name is not None:
            if not input_dto.name.strip():
                raise InvalidRoleError("Role name must not be empty", field="name")
            role.name = input_dto.name.strip()
        if input_dto.description is not None:
            role.description = input_dto.description
        if input_dto.permissions is not None:
            role.replace_permissions(input_dto.permissions)
        role.touch()

        saved = self.role_repository.save(role)

        logger.info(f"Updated role: {saved.name} ({saved.id})")
        return UseCaseResult.ok(RoleDTO.from_entity(saved))
