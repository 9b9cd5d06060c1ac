"""
Apply permission batch use case.
"""
import logging
from dataclasses import dataclass
from typing import Any, List

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import StoreError
from ...domain.exceptions import MalformedPermissionBatchError
from ...domain.repositories.role_repository import RoleRepository
from ...domain.services.permission_batch import decode_permission_batch
from ..dtos.role_dto import PermissionEntryResultDTO

logger = logging.getLogger(__name__)


@dataclass
class ApplyPermissionBatchUseCase(UseCase[Any, List[PermissionEntryResultDTO]]):
    """
    Use case for replacing the permission sets of many roles at once.

    Entries are applied in input order, one update each, and every entry is
    attempted even after an earlier one failed. A role named twice ends up
    with the permissions of its last entry.
    """

    role_repository: RoleRepository

    def execute(self, input_dto: Any) -> UseCaseResult[List[PermissionEntryResultDTO]]:
        decoded = decode_permission_batch(input_dto)
        if not decoded.success:
            logger.warning(f"Rejected permission batch: {decoded.error}")
            raise MalformedPermissionBatchError(decoded.error)

        results = []
        for assignment in decoded.data:
            try:
                updated = self.role_repository.update_fields(
                    assignment.role_id,
                    {'permissions': list(assignment.permissions)},
                )
            except StoreError as e:
                logger.warning(f"Permission update for role {assignment.role_id} failed: {e.message}")
                results.append(PermissionEntryResultDTO.fail(assignment.role_id, e.message, e.code))
                continue

            if updated:
                results.append(PermissionEntryResultDTO.ok(assignment.role_id))
            else:
                logger.warning(f"Permission update skipped, role {assignment.role_id} not found")
                results.append(PermissionEntryResultDTO.fail(
                    assignment.role_id,
                    f"Role '{assignment.role_id}' not found",
                    "ROLE_NOT_FOUND",
                ))

        succeeded = sum(1 for r in results if r.success)
        logger.info(f"Applied permission batch: {succeeded}/{len(results)} roles updated")
        return UseCaseResult.ok(results)
