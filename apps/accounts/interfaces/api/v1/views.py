"""
Accounts API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.role_dto import RoleCreateDTO, RoleUpdateDTO, RoleDTO
from ....application.use_cases import (
    ApplyPermissionBatchUseCase,
    CreateRoleUseCase,
    GetRoleUseCase,
    UpdateRoleUseCase,
)
from ....infrastructure.repositories import DjangoRoleRepository
from ...serializers.role_serializer import (
    RoleSerializer,
    RoleCreateSerializer,
    RoleUpdateSerializer,
    PermissionBatchSerializer,
    PermissionBatchResultSerializer,
)


@extend_schema(tags=['Roles'])
class RoleListCreateView(APIView):
    """Role list and create endpoint."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        responses={200: RoleSerializer(many=True)},
        summary="List roles",
    )
    def get(self, request):
        repository = DjangoRoleRepository()
        roles = repository.find_all(deleted=False)
        serializer = RoleSerializer([RoleDTO.from_entity(r) for r in roles], many=True)
        return Response(serializer.data)

    @extend_schema(
        request=RoleCreateSerializer,
        responses={201: RoleSerializer},
        summary="Create a role",
    )
    def post(self, request):
        serializer = RoleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        result = CreateRoleUseCase(DjangoRoleRepository()).execute(
            RoleCreateDTO(
                name=data['name'],
                description=data['description'],
                permissions=data['permissions'],
            )
        )

        output = RoleSerializer(result.data)
        return Response(output.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Roles'])
class RoleDetailView(APIView):
    """Single role read and edit endpoint."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        responses={200: RoleSerializer},
        summary="Get a role",
    )
    def get(self, request, role_id):
        result = GetRoleUseCase(DjangoRoleRepository()).execute(role_id)
        return Response(RoleSerializer(result.data).data)

    @extend_schema(
        request=RoleUpdateSerializer,
        responses={200: RoleSerializer},
        summary="Edit a role",
    )
    def patch(self, request, role_id):
        serializer = RoleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        result = UpdateRoleUseCase(DjangoRoleRepository()).execute(
            RoleUpdateDTO(
                role_id=role_id,
                name=data.get('name'),
                description=data.get('description'),
                permissions=data.get('permissions'),
            )
        )

        return Response(RoleSerializer(result.data).data)

@extend_schema(tags=['Roles'])
class RolePermissionsView(APIView):
    """Permission matrix endpoint."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=PermissionBatchSerializer,
        responses={200: PermissionBatchResultSerializer},
        summary="Replace the permissions of several roles",
    )
    def patch(self, request):
        serializer = PermissionBatchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ApplyPermissionBatchUseCase(DjangoRoleRepository()).execute(
            serializer.validated_data['permissions']
        )

        succeeded = sum(1 for entry in result.data if entry.success)
        output = PermissionBatchResultSerializer({
            'results': result.data,
            'succeeded': succeeded,
            'failed': len(result.data) - succeeded,
        })
        return Response(output.data)
