"""
Django admin configuration for core models.
"""

from django.contrib import admin

from .models import Store


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    """Admin interface for Store model."""

    list_display = ["name", "phone_number", "gstin", "created_at"]
    search_fields = ["name", "address", "phone_number", "gstin"]
    readonly_fields = ["id", "created_at", "updated_at"]
