"""
URL configuration for inventory app.
"""

from django.urls import path

from . import views

app_name = "inventory"

urlpatterns = [
    path("api/categories", views.CategoryListView.as_view(), name="category_list"),
    path("api/products", views.ProductListView.as_view(), name="product_list"),
]
