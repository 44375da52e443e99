"""
Django admin configuration for order models.
"""

from django.contrib import admin

from .models import Charge, Order, OrderAppliedCharge, OrderItem


@admin.register(Charge)
class ChargeAdmin(admin.ModelAdmin):
    """Admin interface for Charge model."""

    list_display = ["name", "amount", "is_taxable"]
    list_filter = ["is_taxable"]
    search_fields = ["name"]


class OrderItemInline(admin.TabularInline):
    """Inline admin for OrderItem model."""

    model = OrderItem
    extra = 0
    readonly_fields = ["id", "variant", "quantity", "unit_price", "total_price"]
    can_delete = False


class OrderAppliedChargeInline(admin.TabularInline):
    model = OrderAppliedCharge
    extra = 0
    readonly_fields = ["id", "charge", "amount_charged"]
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin interface for Order model."""

    list_display = [
        "id",
        "store",
        "customer_name",
        "total_amount",
        "payment_method",
        "payment_status",
        "order_status",
        "created_at",
    ]
    list_filter = ["payment_status", "order_status", "payment_method", "store", "created_at"]
    search_fields = ["id", "customer_name", "customer_phone", "aggregator_id"]
    list_select_related = ["store"]
    readonly_fields = [
        "id",
        "subtotal",
        "applied_charges_amount_taxable",
        "applied_charges_amount_nontaxable",
        "discount_amount",
        "taxable_amount",
        "cgst_amount",
        "sgst_amount",
        "total_amount",
        "amount_received",
        "change_given",
        "created_at",
        "updated_at",
    ]
    inlines = [OrderItemInline, OrderAppliedChargeInline]
    fieldsets = [
        (
            "Basic Information",
            {
                "fields": ["id", "store", "order_status", "notes"],
            },
        ),
        (
            "Customer",
            {
                "fields": ["customer_name", "customer_phone", "aggregator_id"],
            },
        ),
        (
            "Financial Details",
            {
                "fields": [
                    "subtotal",
                    "applied_charges_amount_taxable",
                    "applied_charges_amount_nontaxable",
                    "discount_amount",
                    "taxable_amount",
                    "cgst_amount",
                    "sgst_amount",
                    "total_amount",
                ],
            },
        ),
        (
            "Payment",
            {
                "fields": ["payment_method", "payment_status", "amount_received", "change_given"],
            },
        ),
        (
            "Timestamps",
            {
                "fields": ["created_at", "updated_at"],
            },
        ),
    ]
