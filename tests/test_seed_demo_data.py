"""
Tests for the seed_demo_data management command.
"""

from io import StringIO

from django.core.management import call_command

import pytest

from apps.core.models import Store
from apps.inventory.models import Category, Inventory, Product, ProductVariant
from apps.orders.models import Charge


def seed(*args):
    out = StringIO()
    call_command("seed_demo_data", *args, stdout=out)
    return out.getvalue()


@pytest.mark.django_db
class TestSeedDemoData:
    def test_seeds_reference_data(self):
        output = seed()

        assert "Seeding finished." in output
        assert list(Store.objects.order_by("name").values_list("name", flat=True)) == [
            "AS Rao Nagar Branch",
            "Kompally Branch",
            "Kondapur Branch",
        ]
        assert Category.objects.count() == 3
        assert Product.objects.count() == 3
        assert ProductVariant.objects.count() == 5
        assert set(Charge.objects.values_list("name", "is_taxable")) == {
            ("Packaging Charge", False),
            ("Delivery Fee (Local)", False),
        }

        inventory = Inventory.objects.get()
        assert inventory.store.name == "Kompally Branch"
        assert inventory.variant.sku == "BAK-MIX-250G"
        assert inventory.variant.is_tracked
        assert inventory.quantity == 50
        assert inventory.min_threshold == 10

    def test_is_idempotent(self):
        seed()
        Inventory.objects.update(quantity=7)

        seed()

        assert Store.objects.count() == 3
        assert ProductVariant.objects.count() == 5
        assert Inventory.objects.get().quantity == 7

    def test_reset_inventory(self):
        seed()
        Inventory.objects.update(quantity=7)

        output = seed("--reset-inventory")

        assert Inventory.objects.get().quantity == 50
        assert "Reset inventory" in output
