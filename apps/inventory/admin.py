"""
Admin configuration for catalog and inventory models.
"""

from django.contrib import admin

from .models import Category, Inventory, Product, ProductVariant


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin interface for Category."""

    list_display = ["name"]
    search_fields = ["name"]


class ProductVariantInline(admin.TabularInline):
    """Inline admin for product variants."""

    model = ProductVariant
    extra = 0
    fields = ["name", "price", "sku", "inventory_tracking_method"]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product."""

    list_display = ["name", "category", "is_active", "created_at"]
    list_filter = ["is_active", "category"]
    search_fields = ["name", "description", "variants__sku"]
    readonly_fields = ["id", "created_at", "updated_at"]
    inlines = [ProductVariantInline]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "category", "description", "image_url", "is_active"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )


@admin.register(Inventory)
class InventoryAdmin(admin.ModelAdmin):
    """Admin interface for per-store stock counters."""

    list_display = ["variant", "store", "quantity", "min_threshold", "low_stock", "updated_at"]
    list_filter = ["store"]
    search_fields = ["variant__name", "variant__sku", "variant__product__name"]
    list_select_related = ["variant__product", "store"]
    readonly_fields = ["updated_at"]

    @admin.display(boolean=True, description="Low stock")
    def low_stock(self, obj):
        return obj.is_low_stock()
