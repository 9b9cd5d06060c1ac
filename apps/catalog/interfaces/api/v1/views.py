"""
Catalog API v1 views.

Every view is bound to one category table through ``category_model``, so the
same views serve product and article categories.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.category_dto import (
    CategoryCreateDTO,
    CategoryStatusChangeDTO,
    CategoriesStatusChangeDTO,
)
from ....application.use_cases import (
    GetCategoryTreeUseCase,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    RestoreCategoryUseCase,
    ChangeCategoryStatusUseCase,
    ChangeCategoriesStatusUseCase,
)
from ....infrastructure.models import ProductCategoryModel
from ....infrastructure.repositories import DjangoCategoryRepository
from ...serializers.category_serializer import (
    CategorySerializer,
    CategoryTreeSerializer,
    CategoryCreateSerializer,
    CategoriesStatusSerializer,
    CascadeDeleteResultSerializer,
)


class CategoryAPIView(APIView):
    """Base view holding the category table it operates on."""
    permission_classes = [IsAdminUser]
    category_model = ProductCategoryModel

    def get_repository(self) -> DjangoCategoryRepository:
        return DjangoCategoryRepository(self.category_model)


@extend_schema(tags=['Categories'])
class CategoryTreeView(CategoryAPIView):
    """Category tree and create endpoint."""

    @extend_schema(
        responses={200: CategoryTreeSerializer(many=True)},
        summary="Get the category tree",
    )
    def get(self, request):
        result = GetCategoryTreeUseCase(self.get_repository()).execute()
        serializer = CategoryTreeSerializer(result.data, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=CategoryCreateSerializer,
        responses={201: CategorySerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        result = CreateCategoryUseCase(self.get_repository()).execute(
            CategoryCreateDTO(
                title=data['title'],
                parent_id=data['parent_id'],
                position=data['position'],
                status=data['status'],
                description=data['description'],
            )
        )

        output = CategorySerializer(result.data)
        return Response(output.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Categories'])
class CategoryDetailView(CategoryAPIView):
    """Category delete endpoint."""

    @extend_schema(
        responses={200: CascadeDeleteResultSerializer},
        summary="Soft delete a category and its descendants",
    )
    def delete(self, request, category_id: str):
        result = DeleteCategoryUseCase(self.get_repository()).execute(category_id)
        return Response(CascadeDeleteResultSerializer(result.data).data)


@extend_schema(tags=['Categories'])
class CategoryRestoreView(CategoryAPIView):
    """Category restore endpoint."""

    @extend_schema(request=None, summary="Restore a soft deleted category")
    def patch(self, request, category_id: str):
        RestoreCategoryUseCase(self.get_repository()).execute(category_id)
        return Response({'id': category_id, 'deleted': False})


@extend_schema(tags=['Categories'])
class CategoryStatusView(CategoryAPIView):
    """Category status endpoint."""

    @extend_schema(request=None, summary="Change the status of a category")
    def patch(self, request, category_id: str, category_status: str):
        result = ChangeCategoryStatusUseCase(self.get_repository()).execute(
            CategoryStatusChangeDTO(category_id=category_id, status=category_status)
        )
        return Response({'id': category_id, 'status': result.data})


@extend_schema(tags=['Categories'])
class CategoriesStatusView(CategoryAPIView):
    """Bulk category status endpoint."""

    @extend_schema(
        request=CategoriesStatusSerializer,
        summary="Change the status of several categories",
    )
    def patch(self, request):
        serializer = CategoriesStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        result = ChangeCategoriesStatusUseCase(self.get_repository()).execute(
            CategoriesStatusChangeDTO(category_ids=data['ids'], status=data['status'])
        )
        return Response({'updated': result.data, 'status': data['status']})
