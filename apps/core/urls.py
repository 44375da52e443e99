"""
URL configuration for core app.
"""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("", views.welcome, name="welcome"),
    path("api/stores", views.StoreListView.as_view(), name="store_list"),
]
