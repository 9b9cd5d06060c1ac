# Value objects
from .category_status import CategoryStatus

__all__ = ['CategoryStatus']
