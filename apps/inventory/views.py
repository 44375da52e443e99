"""
Catalog read endpoints for the storefront.
"""

from django.db.models import Prefetch

from rest_framework import generics, permissions

from .models import Category, Product, ProductVariant
from .serializers import CategorySerializer, ProductSerializer


class CategoryListView(generics.ListAPIView):
    """
    API endpoint listing menu categories.

    GET /api/categories
    """

    serializer_class = CategorySerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None

    def get_queryset(self):
        return Category.objects.order_by("name")


class ProductListView(generics.ListAPIView):
    """
    API endpoint listing active products with category and variants.

    GET /api/products
    Products are sorted by name and each product's variants by name. Ties
    are broken by id so repeated calls return the same order.
    """

    serializer_class = ProductSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None

    def get_queryset(self):
        return (
            Product.objects.filter(is_active=True)
            .select_related("category")
            .prefetch_related(
                Prefetch("variants", queryset=ProductVariant.objects.order_by("name", "id"))
            )
            .order_by("name", "id")
        )
