"""
Role serializers.
"""
from rest_framework import serializers


class RoleSerializer(serializers.Serializer):
    """Serializer for role output."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    permissions = serializers.ListField(child=serializers.CharField(), read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class RoleCreateSerializer(serializers.Serializer):
    """Serializer for role creation."""
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    permissions = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
        default=list,
    )


class RoleUpdateSerializer(serializers.Serializer):
    """Serializer for role edits. Omitted fields are left unchanged."""
    name = serializers.CharField(max_length=100, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    permissions = serializers.ListField(child=serializers.CharField(max_length=100), required=False)


class PermissionBatchSerializer(serializers.Serializer):
    """Serializer for the permission matrix payload.

    ``permissions`` is passed through untouched: either JSON text or an
    already structured list, decoded by the use case.
    """
    permissions = serializers.JSONField()


class PermissionEntryResultSerializer(serializers.Serializer):
    """Serializer for one permission batch entry outcome."""
    role_id = serializers.CharField(read_only=True)
    success = serializers.BooleanField(read_only=True)
    error = serializers.CharField(read_only=True, allow_null=True)
    error_code = serializers.CharField(read_only=True, allow_null=True)


class PermissionBatchResultSerializer(serializers.Serializer):
    """Serializer for the permission batch summary."""
    results = PermissionEntryResultSerializer(many=True, read_only=True)
    succeeded = serializers.IntegerField(read_only=True)
    failed = serializers.IntegerField(read_only=True)
