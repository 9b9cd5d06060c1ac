"""
Accounts domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, MalformedInputError, ValidationError


class RoleNotFoundError(EntityNotFoundError):
    """Raised when a role is not found."""

    def __init__(self, role_id: str):
        super().__init__(entity_name="Role", entity_id=role_id, code="ROLE_NOT_FOUND")
        self.role_id = role_id


class InvalidRoleError(ValidationError):
    """Raised when role data is invalid."""

    def __init__(self, message: str, field: str = "role"):
        super().__init__(message=message, field=field, code="INVALID_ROLE")


class MalformedPermissionBatchError(MalformedInputError):
    """Raised when a permission batch payload cannot be decoded."""

    def __init__(self, reason: str):
        super().__init__(message=f"Malformed permission batch: {reason}")
        self.reason = reason
