# DTOs
from .category_dto import (
    CategoryCreateDTO,
    CategoryStatusChangeDTO,
    CategoriesStatusChangeDTO,
    CategoryDTO,
    CategoryTreeDTO,
    CascadeDeleteResultDTO,
)

__all__ = [
    'CategoryCreateDTO',
    'CategoryStatusChangeDTO',
    'CategoriesStatusChangeDTO',
    'CategoryDTO',
    'CategoryTreeDTO',
    'CascadeDeleteResultDTO',
]
