"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, ValidationError


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, category_id: str):
        super().__init__(
            entity_name="Category",
            entity_id=category_id,
            code="CATEGORY_NOT_FOUND"
        )
        self.category_id = category_id


class InvalidCategoryStatusError(ValidationError):
    """Raised when a status value is outside the allowed set."""

    def __init__(self, status: str):
        super().__init__(
            message=f"Invalid category status: '{status}'",
            field="status",
            code="INVALID_CATEGORY_STATUS"
        )
        self.status = status


class InvalidCategoryError(ValidationError):
    """Raised when category data is invalid."""

    def __init__(self, message: str, field: str = "category"):
        super().__init__(message=message, field=field, code="INVALID_CATEGORY")
