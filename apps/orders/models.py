"""
Order models for the Kunafa Kingdom POS backend.

- Charges are named extra fees (packaging, delivery) with a default amount
- Orders capture one checkout with all computed monetary fields
- Order items and applied charges capture prices at order time, so later
  catalog edits never change a stored order
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import Store
from apps.inventory.models import ProductVariant


class PaymentMethod(models.TextChoices):
    CASH = "Cash", "Cash"
    CARD = "Card", "Card"
    UPI = "UPI", "UPI"
    SWIGGY = "Swiggy", "Swiggy"
    ZOMATO = "Zomato", "Zomato"
    OTHER = "Other", "Other"


class PaymentStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    PAID = "Paid", "Paid"
    FAILED = "Failed", "Failed"
    REFUNDED = "Refunded", "Refunded"


class OrderStatus(models.TextChoices):
    RECEIVED = "Received", "Received"
    PREPARING = "Preparing", "Preparing"
    READY_FOR_PICKUP = "ReadyForPickup", "Ready for pickup"
    OUT_FOR_DELIVERY = "OutForDelivery", "Out for delivery"
    COMPLETED = "Completed", "Completed"
    CANCELLED = "Cancelled", "Cancelled"


MONEY_MAX_DIGITS = 12
MONEY_DECIMAL_PLACES = 2

# Largest value a money column holds: 9999999999.99
MAX_MONEY_AMOUNT = Decimal(10 ** (MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES)) - Decimal("0.01")

# Upper bound of PositiveIntegerField on every supported backend
MAX_ITEM_QUANTITY = 2147483647


def money_field(help_text, **kwargs):
    """Two-decimal, non-negative money column."""
    kwargs.setdefault("validators", [MinValueValidator(Decimal("0.00"))])
    return models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        help_text=help_text,
        **kwargs,
    )


class Charge(models.Model):
    """
    Additional fee that can be applied to an order.

    ``amount`` is only the default: the amount actually charged is captured
    per order on OrderAppliedCharge.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the charge",
    )

    name = models.CharField(
        max_length=100,
        unique=True,
        help_text="Charge name (e.g., 'Packaging Charge')",
    )

    amount = money_field("Default amount for this charge")

    is_taxable = models.BooleanField(
        default=False,
        help_text="Whether the charge is included in the CGST/SGST base",
    )

    class Meta:
        db_table = "charges"
        ordering = ["name"]
        verbose_name = "Charge"
        verbose_name_plural = "Charges"

    def __str__(self):
        return f"{self.name} ({self.amount})"


class Order(models.Model):
    """
    One checkout transaction.

    Monetary fields are always derived from the order's items and applied
    charges (see ``apps.orders.services.calculate_totals``). Orders are
    created together with their children in one transaction and are not
    modified afterwards by the ordering flow.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the order",
    )

    store = models.ForeignKey(
        Store,
        on_delete=models.PROTECT,
        related_name="orders",
        help_text="Store where the order was placed",
    )

    # Customer details (optional for walk-in orders)
    customer_name = models.CharField(max_length=255, blank=True, null=True)
    customer_phone = models.CharField(max_length=20, blank=True, null=True)
    aggregator_id = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        help_text="Order reference from the delivery aggregator, if any",
    )

    # Financial details
    subtotal = money_field("Sum of unit price x quantity over all items")
    applied_charges_amount_taxable = money_field(
        "Sum of taxable applied charges", default=Decimal("0.00")
    )
    applied_charges_amount_nontaxable = money_field(
        "Sum of non-taxable applied charges", default=Decimal("0.00")
    )
    discount_amount = money_field("Discount amount", default=Decimal("0.00"))
    taxable_amount = money_field("Subtotal plus taxable charges")
    cgst_amount = money_field("Central GST on the taxable amount")
    sgst_amount = money_field("State GST on the taxable amount")
    total_amount = money_field("Grand total payable")

    # Payment details
    payment_method = models.CharField(
        max_length=20,
        choices=PaymentMethod.choices,
        help_text="Payment method selected at checkout",
    )
    amount_received = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Cash tendered by the customer",
    )
    change_given = money_field("Change returned for cash payments", null=True, blank=True)
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
    )

    order_status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.RECEIVED,
    )

    notes = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        verbose_name = "Order"
        verbose_name_plural = "Orders"
        indexes = [
            models.Index(fields=["store", "-created_at"], name="order_store_date_idx"),
            models.Index(fields=["payment_status"], name="order_payment_status_idx"),
        ]

    def __str__(self):
        return f"{self.id} - {self.total_amount}"


class OrderItem(models.Model):
    """Line item of an order, priced as captured at order time."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the order item",
    )

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Order that this item belongs to",
    )

    variant = models.ForeignKey(
        ProductVariant,
        on_delete=models.PROTECT,
        related_name="order_items",
        help_text="Variant that was ordered",
    )

    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Quantity ordered",
    )

    unit_price = money_field("Unit price at time of order (may differ from current price)")

    total_price = money_field("Line total (quantity * unit_price)")

    class Meta:
        db_table = "order_items"
        verbose_name = "Order Item"
        verbose_name_plural = "Order Items"

    def __str__(self):
        return f"{self.variant} x {self.quantity}"


class OrderAppliedCharge(models.Model):
    """A charge attached to one order at the amount actually charged."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the applied charge",
    )

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="applied_charges",
        help_text="Order the charge was applied to",
    )

    charge = models.ForeignKey(
        Charge,
        on_delete=models.PROTECT,
        related_name="applications",
        help_text="Charge that was applied",
    )

    amount_charged = money_field("Amount charged on this order")

    class Meta:
        db_table = "order_applied_charges"
        verbose_name = "Order Applied Charge"
        verbose_name_plural = "Order Applied Charges"

    def __str__(self):
        return f"{self.charge.name}: {self.amount_charged}"
