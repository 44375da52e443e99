"""
Pytest configuration and fixtures for the Kunafa Kingdom POS backend.
"""

from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def store(db):
    """
    Fixture for creating a test store.
    """
    from apps.core.models import Store

    return Store.objects.create(
        name="Kompally Branch",
        address="123 Kompally Main Rd, Hyderabad",
        phone_number="9876543210",
    )


@pytest.fixture
def other_store(db):
    from apps.core.models import Store

    return Store.objects.create(name="Kondapur Branch")


@pytest.fixture
def category(db):
    from apps.inventory.models import Category

    return Category.objects.create(name="Kunafa")


@pytest.fixture
def product(category):
    """
    Fixture for an active product without variants.
    """
    from apps.inventory.models import Product

    return Product.objects.create(
        name="Classic Cheese Kunafa",
        description="The timeless classic, crispy and cheesy.",
        category=category,
    )


@pytest.fixture
def untracked_variant(product):
    """
    Made-to-order variant, never checked against inventory.
    """
    from apps.inventory.models import InventoryTrackingMethod, ProductVariant

    return ProductVariant.objects.create(
        product=product,
        name="Regular",
        price=Decimal("250.00"),
        sku="KUN-CLS-REG",
        inventory_tracking_method=InventoryTrackingMethod.UNTRACKED,
    )


@pytest.fixture
def tracked_variant(category):
    """
    Stock-tracked variant of a separate boxed product.
    """
    from apps.inventory.models import InventoryTrackingMethod, Product, ProductVariant

    boxed = Product.objects.create(name="Assorted Baklava Box", category=category)
    return ProductVariant.objects.create(
        product=boxed,
        name="250g Box",
        price=Decimal("400.00"),
        sku="BAK-MIX-250G",
        inventory_tracking_method=InventoryTrackingMethod.TRACKED,
    )


@pytest.fixture
def inventory(store, tracked_variant):
    """
    Fixture for 5 units of the tracked variant at the test store.
    """
    from apps.inventory.models import Inventory

    return Inventory.objects.create(
        variant=tracked_variant,
        store=store,
        quantity=5,
        min_threshold=2,
    )


@pytest.fixture
def taxable_charge(db):
    from apps.orders.models import Charge

    return Charge.objects.create(name="Service Charge", amount=Decimal("50.00"), is_taxable=True)


@pytest.fixture
def packaging_charge(db):
    from apps.orders.models import Charge

    return Charge.objects.create(
        name="Packaging Charge", amount=Decimal("20.00"), is_taxable=False
    )


@pytest.fixture
def order_payload(store, untracked_variant):
    """
    Builder for checkout payloads: two Regular kunafa at 250 paid by Card.

    Keyword arguments override top-level payload keys.
    """

    def build(**overrides):
        payload = {
            "storeId": str(store.id),
            "payment_method": "Card",
            "items": [
                {
                    "variantId": str(untracked_variant.id),
                    "quantity": 2,
                    "unit_price": "250.00",
                }
            ],
        }
        payload.update(overrides)
        return payload

    return build
