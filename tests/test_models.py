"""
Tests for store, catalog, inventory and order models.
"""

from decimal import Decimal

from django.db import IntegrityError

import pytest

from apps.inventory.models import Inventory, InventoryTrackingMethod, ProductVariant
from apps.orders.models import Order, OrderItem, OrderStatus, PaymentMethod, PaymentStatus


@pytest.mark.django_db
class TestCatalogModels:
    def test_variant_defaults_to_tracked(self, product):
        variant = ProductVariant.objects.create(product=product, name="Large", price=Decimal("450"))

        assert variant.inventory_tracking_method == InventoryTrackingMethod.TRACKED
        assert variant.is_tracked is True
        assert str(variant) == "Classic Cheese Kunafa - Large"

    def test_untracked_variant(self, untracked_variant):
        assert untracked_variant.is_tracked is False

    def test_product_names_are_unique(self, product, category):
        from apps.inventory.models import Product

        with pytest.raises(IntegrityError):
            Product.objects.create(name=product.name, category=category)


@pytest.mark.django_db
class TestInventoryModel:
    """Test per-store stock counters."""

    def test_one_row_per_variant_and_store(self, inventory):
        with pytest.raises(IntegrityError):
            Inventory.objects.create(variant=inventory.variant, store=inventory.store, quantity=1)

    def test_low_stock(self, inventory):
        assert inventory.is_low_stock() is False

        inventory.quantity = 2
        assert inventory.is_low_stock() is True

    def test_can_deduct_quantity(self, inventory):
        assert inventory.can_deduct_quantity(5) is True
        assert inventory.can_deduct_quantity(6) is False

    def test_deduct(self, inventory):
        updated = Inventory.objects.filter(pk=inventory.pk).deduct(3)

        assert updated == 1
        inventory.refresh_from_db()
        assert inventory.quantity == 2

    def test_deduct_never_goes_negative(self, inventory):
        updated = Inventory.objects.filter(pk=inventory.pk).deduct(6)

        assert updated == 0
        inventory.refresh_from_db()
        assert inventory.quantity == 5


@pytest.mark.django_db
class TestOrderModel:
    def test_defaults(self, store, untracked_variant):
        order = Order.objects.create(
            store=store,
            subtotal=Decimal("250.00"),
            taxable_amount=Decimal("250.00"),
            cgst_amount=Decimal("22.50"),
            sgst_amount=Decimal("22.50"),
            total_amount=Decimal("295.00"),
            payment_method=PaymentMethod.UPI,
        )
        OrderItem.objects.create(
            order=order,
            variant=untracked_variant,
            quantity=1,
            unit_price=Decimal("250.00"),
            total_price=Decimal("250.00"),
        )

        assert order.payment_status == PaymentStatus.PENDING
        assert order.order_status == OrderStatus.RECEIVED
        assert order.discount_amount == Decimal("0.00")
        assert order.items.count() == 1
        assert store.orders.get() == order

    def test_ordered_variant_cannot_be_deleted(self, store, untracked_variant):
        from django.db.models import ProtectedError

        order = Order.objects.create(
            store=store,
            subtotal=Decimal("250.00"),
            taxable_amount=Decimal("250.00"),
            cgst_amount=Decimal("22.50"),
            sgst_amount=Decimal("22.50"),
            total_amount=Decimal("295.00"),
            payment_method=PaymentMethod.CARD,
        )
        OrderItem.objects.create(
            order=order,
            variant=untracked_variant,
            quantity=1,
            unit_price=Decimal("250.00"),
            total_price=Decimal("250.00"),
        )

        with pytest.raises(ProtectedError):
            untracked_variant.delete()
