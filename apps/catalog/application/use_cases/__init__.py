# Use cases
from .get_category_tree import GetCategoryTreeUseCase
from .create_category import CreateCategoryUseCase
from .delete_category import DeleteCategoryUseCase
from .restore_category import RestoreCategoryUseCase
from .change_category_status import ChangeCategoryStatusUseCase, ChangeCategoriesStatusUseCase

__all__ = [
    'GetCategoryTreeUseCase',
    'CreateCategoryUseCase',
    'DeleteCategoryUseCase',
    'RestoreCategoryUseCase',
    'ChangeCategoryStatusUseCase',
    'ChangeCategoriesStatusUseCase',
]
