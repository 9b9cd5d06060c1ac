"""
Get role use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import RoleNotFoundError
from ...domain.repositories.role_repository import RoleRepository
from ..dtos.role_dto import RoleDTO


@dataclass
class GetRoleUseCase(UseCase[str, RoleDTO]):
    """Use case for loading one live role."""

    role_repository: RoleRepository

    def execute(self, input_dto: str) -> UseCaseResult[RoleDTO]:
        role = self.role_repository.find_by_id(input_dto)
        if role is None or role.deleted:
            raise RoleNotFoundError(input_dto)
        return UseCaseResult.ok(RoleDTO.from_entity(role))
