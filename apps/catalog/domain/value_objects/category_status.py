"""
Category status value object.
"""
from enum import Enum

from ..exceptions import InvalidCategoryStatusError


class CategoryStatus(str, Enum):
    """Display status of a category."""
    ACTIVE = 'active'
    INACTIVE = 'inactive'

    @classmethod
    def parse(cls, value) -> 'CategoryStatus':
        """Parse a raw status, raising InvalidCategoryStatusError on unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidCategoryStatusError(str(value))

    @classmethod
    def choices(cls):
        return [(status.value, status.name.title()) for status in cls]
