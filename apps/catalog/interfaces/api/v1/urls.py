"""
Catalog API v1 URLs.
"""
from django.urls import path

from ....infrastructure.models import ProductCategoryModel, ArticleCategoryModel
from .views import (
    CategoryTreeView,
    CategoryDetailView,
    CategoryRestoreView,
    CategoryStatusView,
    CategoriesStatusView,
)


def category_urlpatterns(prefix: str, category_model):
    """Routes for one category table."""
    bound = {'category_model': category_model}
    return [
        path(f'{prefix}/', CategoryTreeView.as_view(**bound), name=f'{prefix}-tree'),
        path(f'{prefix}/status/', CategoriesStatusView.as_view(**bound), name=f'{prefix}-status-many'),
        path(f'{prefix}/<str:category_id>/', CategoryDetailView.as_view(**bound), name=f'{prefix}-detail'),
        path(
            f'{prefix}/<str:category_id>/restore/',
            CategoryRestoreView.as_view(**bound),
            name=f'{prefix}-restore',
        ),
        path(
            f'{prefix}/<str:category_id>/status/<str:category_status>/',
            CategoryStatusView.as_view(**bound),
            name=f'{prefix}-status',
        ),
    ]


urlpatterns = [
    *category_urlpatterns('product-categories', ProductCategoryModel),
    *category_urlpatterns('article-categories', ArticleCategoryModel),
]
