"""
Serializers for Product API endpoints.

Request bodies are validated by the product handlers; these serializers
describe the wire format for the OpenAPI schema.
"""

from rest_framework import serializers

from products.domain.product import CATEGORY_VALUES, MAX_IMAGES


class ProductRequestSerializer(serializers.Serializer):
    """Serializer for create/update product request."""

    name = serializers.CharField(min_length=3, max_length=100)
    description = serializers.CharField(max_length=1000)
    price = serializers.FloatField(min_value=0)
    stock = serializers.IntegerField(min_value=0, required=False, default=0)
    category = serializers.ChoiceField(choices=CATEGORY_VALUES)
    images = serializers.ListField(
        child=serializers.CharField(), max_length=MAX_IMAGES, required=False
    )
    featured = serializers.BooleanField(required=False, default=False)


class ProductSerializer(serializers.Serializer):
    """Serializer for a product snapshot."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.FloatField()
    stock = serializers.IntegerField()
    category = serializers.ChoiceField(choices=CATEGORY_VALUES)
    images = serializers.ListField(child=serializers.CharField())
    featured = serializers.BooleanField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class PaginationSerializer(serializers.Serializer):
    """Serializer for a listing's pagination summary."""

    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total = serializers.IntegerField()
    total_pages = serializers.IntegerField()


class ProductPageSerializer(serializers.Serializer):
    """Serializer for one page of products."""

    products = ProductSerializer(many=True)
    pagination = PaginationSerializer()


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()


class ProductResponseSerializer(serializers.Serializer):
    """Serializer for a successful single-product response."""

    success = serializers.BooleanField()
    data = ProductSerializer()


class ProductPageResponseSerializer(serializers.Serializer):
    """Serializer for a successful listing response."""

    success = serializers.BooleanField()
    data = ProductPageSerializer()


class MessageResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    data = MessageSerializer()


class FieldErrorSerializer(serializers.Serializer):
    field = serializers.CharField()
    message = serializers.CharField()


class FailureResponseSerializer(serializers.Serializer):
    """Serializer for a failed operation response."""

    success = serializers.BooleanField()
    error = serializers.CharField()
    errors = FieldErrorSerializer(many=True, required=False)
