# Django discovers app models here
from .infrastructure.models import BaseCategoryModel, ProductCategoryModel, ArticleCategoryModel

__all__ = ['BaseCategoryModel', 'ProductCategoryModel', 'ArticleCategoryModel']
