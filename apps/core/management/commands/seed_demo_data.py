"""
Management command to seed stores, menu, charges and starting stock.
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.core.models import Store
from apps.inventory.models import (
    Category,
    Inventory,
    InventoryTrackingMethod,
    Product,
    ProductVariant,
)
from apps.orders.models import Charge

STORES = [
    {
        "name": "Kompally Branch",
        "address": "123 Kompally Main Rd, Hyderabad",
        "phone_number": "9876543210",
    },
    {
        "name": "AS Rao Nagar Branch",
        "address": "456 AS Rao Nagar Circle, Hyderabad",
        "phone_number": "9876543211",
    },
    {
        "name": "Kondapur Branch",
        "address": "789 Kondapur High Street, Hyderabad",
        "phone_number": "9876543212",
    },
]

CATEGORIES = ["Kunafa", "Baklava", "Beverages"]

# Kunafa is made to order, so only the boxed baklava is stock-tracked
PRODUCTS = [
    {
        "name": "Classic Cheese Kunafa",
        "description": "The timeless classic, crispy and cheesy.",
        "category": "Kunafa",
        "variants": [
            ("Regular", "250", "KUN-CLS-REG", InventoryTrackingMethod.UNTRACKED),
            ("Large", "450", "KUN-CLS-LRG", InventoryTrackingMethod.UNTRACKED),
        ],
    },
    {
        "name": "Nutella Kunafa",
        "description": "A decadent twist with rich Nutella.",
        "category": "Kunafa",
        "variants": [
            ("Regular", "300", "KUN-NUT-REG", InventoryTrackingMethod.UNTRACKED),
        ],
    },
    {
        "name": "Assorted Baklava Box",
        "description": "A delightful mix of our finest baklavas.",
        "category": "Baklava",
        "variants": [
            ("250g Box", "400", "BAK-MIX-250G", InventoryTrackingMethod.TRACKED),
            ("500g Box", "750", "BAK-MIX-500G", InventoryTrackingMethod.TRACKED),
        ],
    },
]

CHARGES = [
    ("Packaging Charge", "20", False),
    ("Delivery Fee (Local)", "50", False),
]

INITIAL_STOCK = {
    "store": "Kompally Branch",
    "sku": "BAK-MIX-250G",
    "quantity": 50,
    "min_threshold": 10,
}


class Command(BaseCommand):
    help = "Seed demo stores, catalog, charges and initial inventory"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset-inventory",
            action="store_true",
            help="Reset the seeded inventory row to its initial quantity",
        )

    def handle(self, *args, **options):
        self.stdout.write("Seeding demo data...")

        with transaction.atomic():
            stores = self._create_stores()
            categories = self._create_categories()
            variants = self._create_products(categories)
            self._create_charges()
            self._create_inventory(stores, variants, options["reset_inventory"])

        self.stdout.write(self.style.SUCCESS("Seeding finished."))

    def _create_stores(self):
        """Create or get stores, keyed by name."""
        stores = {}
        for data in STORES:
            store, created = Store.objects.get_or_create(
                name=data["name"],
                defaults={"address": data["address"], "phone_number": data["phone_number"]},
            )
            stores[store.name] = store
            self._report("store", store.name, created)
        return stores

    def _create_categories(self):
        categories = {}
        for name in CATEGORIES:
            category, created = Category.objects.get_or_create(name=name)
            categories[name] = category
            self._report("category", name, created)
        return categories

    def _create_products(self, categories):
        """Create or get products and their variants, returning variants keyed by SKU."""
        variants = {}
        for data in PRODUCTS:
            product, created = Product.objects.get_or_create(
                name=data["name"],
                defaults={
                    "description": data["description"],
                    "category": categories[data["category"]],
                    "is_active": True,
                },
            )
            self._report("product", product.name, created)

            for name, price, sku, tracking in data["variants"]:
                variant, _ = ProductVariant.objects.get_or_create(
                    sku=sku,
                    defaults={
                        "product": product,
                        "name": name,
                        "price": Decimal(price),
                        "inventory_tracking_method": tracking,
                    },
                )
                variants[sku] = variant
        return variants

    def _create_charges(self):
        for name, amount, is_taxable in CHARGES:
            _, created = Charge.objects.get_or_create(
                name=name,
                defaults={"amount": Decimal(amount), "is_taxable": is_taxable},
            )
            self._report("charge", name, created)

    def _create_inventory(self, stores, variants, reset):
        store = stores[INITIAL_STOCK["store"]]
        variant = variants[INITIAL_STOCK["sku"]]
        inventory, created = Inventory.objects.get_or_create(
            variant=variant,
            store=store,
            defaults={
                "quantity": INITIAL_STOCK["quantity"],
                "min_threshold": INITIAL_STOCK["min_threshold"],
            },
        )
        if reset and not created:
            inventory.quantity = INITIAL_STOCK["quantity"]
            inventory.save(update_fields=["quantity", "updated_at"])
            self.stdout.write(
                self.style.WARNING(
                    f"Reset inventory for {variant} at {store.name} to {inventory.quantity}"
                )
            )
        else:
            self._report("inventory", f"{variant} at {store.name}", created)

    def _report(self, kind, name, created):
        if created:
            self.stdout.write(self.style.SUCCESS(f"Created {kind}: {name}"))
        else:
            self.stdout.write(f"{kind.capitalize()} already exists: {name}")
