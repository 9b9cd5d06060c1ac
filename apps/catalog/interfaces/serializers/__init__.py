# Serializers
from .category_serializer import (
    CategorySerializer,
    CategoryTreeSerializer,
    CategoryCreateSerializer,
    CategoriesStatusSerializer,
    CascadeDeleteResultSerializer,
)

__all__ = [
    'CategorySerializer',
    'CategoryTreeSerializer',
    'CategoryCreateSerializer',
    'CategoriesStatusSerializer',
    'CascadeDeleteResultSerializer',
]
