# Django models
from .category_model import BaseCategoryModel, ProductCategoryModel, ArticleCategoryModel

__all__ = ['BaseCategoryModel', 'ProductCategoryModel', 'ArticleCategoryModel']
