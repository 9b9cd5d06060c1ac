"""
Category serializers.
"""
from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    parent_id = serializers.CharField(read_only=True)
    position = serializers.IntegerField(read_only=True, allow_null=True)
    status = serializers.CharField(read_only=True)
    deleted = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class CategoryNodeSerializer(serializers.Serializer):
    """Serializer for the fields of a single tree node."""
    id = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    parent_id = serializers.CharField(read_only=True)
    position = serializers.IntegerField(read_only=True, allow_null=True)
    status = serializers.CharField(read_only=True)


class CategoryTreeSerializer(CategoryNodeSerializer):
    """Serializer for a category tree node and its children."""
    children = serializers.ListField(child=serializers.DictField(), read_only=True)

    def to_representation(self, instance):
        # Nesting depth is unbounded, so descendants are rendered from a stack.
        node_serializer = CategoryNodeSerializer()
        root = {**node_serializer.to_representation(instance), 'children': []}
        stack = [(instance, root)]
        while stack:
            node, data = stack.pop()
            for child in node.children:
                child_data = {**node_serializer.to_representation(child), 'children': []}
                data['children'].append(child_data)
                stack.append((child, child_data))
        return root


class CategoryCreateSerializer(serializers.Serializer):
    """Serializer for category creation."""
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    parent_id = serializers.CharField(required=False, allow_blank=True, default='', max_length=32)
    # Non-numeric positions are accepted and replaced by the next free slot.
    position = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    status = serializers.CharField(required=False, default='active')


class CategoriesStatusSerializer(serializers.Serializer):
    """Serializer for bulk status change."""
    ids = serializers.ListField(child=serializers.CharField(max_length=32), allow_empty=False)
    status = serializers.CharField()


class CascadeDeleteResultSerializer(serializers.Serializer):
    """Serializer for cascade delete outcome."""
    category_id = serializers.CharField(read_only=True)
    affected_count = serializers.IntegerField(read_only=True)
    failed_ids = serializers.ListField(child=serializers.CharField(), read_only=True)
