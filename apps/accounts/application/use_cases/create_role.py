"""
Create role use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.role import Role
from ...domain.repositories.role_repository import RoleRepository
from ..dtos.role_dto import RoleCreateDTO, RoleDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateRoleUseCase(UseCase[RoleCreateDTO, RoleDTO]):
    """Use case for creating a role."""

    role_repository: RoleRepository

    def execute(self, input_dto: RoleCreateDTO) -> UseCaseResult[RoleDTO]:
        role = Role.create(
            name=input_dto.name,
            description=input_dto.description,
            permissions=input_dto.permissions,
        )
        saved = self.role_repository.save(role)

        logger.info(f"Created role: {saved.name} ({saved.id})")
        return UseCaseResult.ok(RoleDTO.from_entity(saved))
