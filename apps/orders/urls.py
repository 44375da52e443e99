"""
URL configuration for orders app.
"""

from django.urls import path

from . import views

app_name = "orders"

urlpatterns = [
    path("api/charges", views.ChargeListView.as_view(), name="charge_list"),
    path("api/orders", views.create_order, name="order_create"),
    path("api/orders/quote", views.quote_order, name="order_quote"),
    path("api/orders/<uuid:pk>", views.OrderDetailView.as_view(), name="order_detail"),
]
