"""
Serializers for catalog models.

Foreign keys are exposed as ``<relation>Id`` keys because that is the shape
the storefront client consumes.
"""

from rest_framework import serializers

from .models import Category, Product, ProductVariant


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for Category model."""

    class Meta:
        model = Category
        fields = ["id", "name"]


class ProductVariantSerializer(serializers.ModelSerializer):
    """Serializer for a purchasable variant."""

    productId = serializers.UUIDField(source="product_id", read_only=True)

    class Meta:
        model = ProductVariant
        fields = [
            "id",
            "name",
            "price",
            "sku",
            "inventory_tracking_method",
            "productId",
        ]


class ProductSummarySerializer(serializers.ModelSerializer):
    """Product without its variants, used when nesting under a variant."""

    categoryId = serializers.UUIDField(source="category_id", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "image_url",
            "is_active",
            "categoryId",
        ]


class ProductSerializer(ProductSummarySerializer):
    """Menu product with its category and variants."""

    category = CategorySerializer(read_only=True)
    variants = ProductVariantSerializer(many=True, read_only=True)

    class Meta(ProductSummarySerializer.Meta):
        fields = ProductSummarySerializer.Meta.fields + ["category", "variants"]


class ProductVariantDetailSerializer(ProductVariantSerializer):
    """Variant joined to its product, used on order lines."""

    product = ProductSummarySerializer(read_only=True)

    class Meta(ProductVariantSerializer.Meta):
        fields = ProductVariantSerializer.Meta.fields + ["product"]
