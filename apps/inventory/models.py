"""
Catalog and inventory models for the Kunafa Kingdom POS backend.

- Categories group products on the storefront menu
- Products own one or more priced variants (the purchasable unit)
- Inventory counts stock per (variant, store) for tracked variants
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import F
from django.utils import timezone

from apps.core.models import Store


class InventoryTrackingMethod(models.TextChoices):
    """How stock is enforced for a variant when an order is placed."""

    TRACKED = "Tracked", "Tracked (stock enforced)"
    UNTRACKED = "Untracked", "Untracked (made to order)"


class Category(models.Model):
    """Menu category (e.g. Kunafa, Baklava, Beverages)."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the category",
    )

    name = models.CharField(
        max_length=100,
        unique=True,
        help_text="Category name",
    )

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name = "Category"
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name


class Product(models.Model):
    """
    Menu product.

    A product is only a display grouping: prices, SKUs and stock tracking
    live on its variants.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the product",
    )

    name = models.CharField(
        max_length=255,
        unique=True,
        help_text="Product name (e.g., 'Classic Cheese Kunafa')",
    )

    description = models.TextField(
        blank=True,
        null=True,
        help_text="Description shown on the menu",
    )

    image_url = models.URLField(
        max_length=500,
        blank=True,
        null=True,
        help_text="Image shown on the menu",
    )

    is_active = models.BooleanField(
        default=True,
        help_text="Inactive products are hidden from the storefront",
    )

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="products",
        help_text="Menu category",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["name"]
        verbose_name = "Product"
        verbose_name_plural = "Products"
        indexes = [
            models.Index(fields=["is_active", "name"], name="product_active_name_idx"),
        ]

    def __str__(self):
        return self.name


class ProductVariant(models.Model):
    """
    Purchasable version of a product (size, flavour, box weight).

    Each variant carries its own price and SKU. Its tracking method decides
    whether orders are checked against per-store inventory.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the variant",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="variants",
        help_text="Product this variant belongs to",
    )

    name = models.CharField(
        max_length=100,
        help_text="Variant name (e.g., 'Regular', 'Large', '250g Box')",
    )

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Current selling price",
    )

    sku = models.CharField(
        max_length=100,
        unique=True,
        null=True,
        blank=True,
        help_text="Stock Keeping Unit",
    )

    inventory_tracking_method = models.CharField(
        max_length=20,
        choices=InventoryTrackingMethod.choices,
        default=InventoryTrackingMethod.TRACKED,
        help_text="Whether stock is enforced for this variant at order time",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "product_variants"
        ordering = ["name"]
        verbose_name = "Product Variant"
        verbose_name_plural = "Product Variants"

    def __str__(self):
        return f"{self.product.name} - {self.name}"

    @property
    def is_tracked(self):
        """Whether orders for this variant must consume inventory."""
        return self.inventory_tracking_method == InventoryTrackingMethod.TRACKED


class InventoryQuerySet(models.QuerySet):
    def deduct(self, quantity):
        """
        Decrement quantity by ``quantity`` on rows that still hold enough stock.

        The stock condition is part of the UPDATE itself, so a row never goes
        below zero even if it changed after it was read. Returns the number of
        rows updated.
        """
        return self.filter(quantity__gte=quantity).update(
            quantity=F("quantity") - quantity, updated_at=timezone.now()
        )


class Inventory(models.Model):
    """
    Stock counter for one variant at one store.

    Only consulted for variants whose tracking method is ``Tracked``.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the inventory record",
    )

    variant = models.ForeignKey(
        ProductVariant,
        on_delete=models.CASCADE,
        related_name="inventory",
        help_text="Variant being counted",
    )

    store = models.ForeignKey(
        Store,
        on_delete=models.CASCADE,
        related_name="inventory",
        help_text="Store holding the stock",
    )

    quantity = models.PositiveIntegerField(
        default=0,
        help_text="Current quantity in stock",
    )

    min_threshold = models.PositiveIntegerField(
        default=0,
        help_text="Minimum quantity threshold for low stock alerts",
    )

    updated_at = models.DateTimeField(auto_now=True)

    objects = InventoryQuerySet.as_manager()

    class Meta:
        db_table = "inventory"
        ordering = ["store", "variant"]
        verbose_name = "Inventory"
        verbose_name_plural = "Inventory"
        constraints = [
            models.UniqueConstraint(
                fields=["variant", "store"], name="inventory_variant_store_uniq"
            ),
        ]

    def __str__(self):
        return f"{self.variant} @ {self.store.name}: {self.quantity}"

    def is_low_stock(self):
        """Check if stock is at or below the minimum threshold."""
        return self.quantity <= self.min_threshold

    def can_deduct_quantity(self, quantity):
        """Check if we can deduct the specified quantity."""
        return self.quantity >= quantity
