import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


def money(help_text, **kwargs):
    return models.DecimalField(
        decimal_places=2,
        help_text=help_text,
        max_digits=12,
        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
        **kwargs,
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
        ("inventory", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Charge",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the charge",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Charge name (e.g., 'Packaging Charge')",
                        max_length=100,
                        unique=True,
                    ),
                ),
                ("amount", money("Default amount for this charge")),
                (
                    "is_taxable",
                    models.BooleanField(
                        default=False,
                        help_text="Whether the charge is included in the CGST/SGST base",
                    ),
                ),
            ],
            options={
                "verbose_name": "Charge",
                "verbose_name_plural": "Charges",
                "db_table": "charges",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the order",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("customer_name", models.CharField(blank=True, max_length=255, null=True)),
                ("customer_phone", models.CharField(blank=True, max_length=20, null=True)),
                (
                    "aggregator_id",
                    models.CharField(
                        blank=True,
                        help_text="Order reference from the delivery aggregator, if any",
                        max_length=100,
                        null=True,
                    ),
                ),
                ("subtotal", money("Sum of unit price x quantity over all items")),
                (
                    "applied_charges_amount_taxable",
                    money("Sum of taxable applied charges", default=Decimal("0.00")),
                ),
                (
                    "applied_charges_amount_nontaxable",
                    money("Sum of non-taxable applied charges", default=Decimal("0.00")),
                ),
                ("discount_amount", money("Discount amount", default=Decimal("0.00"))),
                ("taxable_amount", money("Subtotal plus taxable charges")),
                ("cgst_amount", money("Central GST on the taxable amount")),
                ("sgst_amount", money("State GST on the taxable amount")),
                ("total_amount", money("Grand total payable")),
                (
                    "payment_method",
                    models.CharField(
                        choices=[
                            ("Cash", "Cash"),
                            ("Card", "Card"),
                            ("UPI", "UPI"),
                            ("Swiggy", "Swiggy"),
                            ("Zomato", "Zomato"),
                            ("Other", "Other"),
                        ],
                        help_text="Payment method selected at checkout",
                        max_length=20,
                    ),
                ),
                (
                    "amount_received",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        help_text="Cash tendered by the customer",
                        max_digits=12,
                        null=True,
                    ),
                ),
                (
                    "change_given",
                    money("Change returned for cash payments", blank=True, null=True),
                ),
                (
                    "payment_status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("Paid", "Paid"),
                            ("Failed", "Failed"),
                            ("Refunded", "Refunded"),
                        ],
                        default="Pending",
                        max_length=20,
                    ),
                ),
                (
                    "order_status",
                    models.CharField(
                        choices=[
                            ("Received", "Received"),
                            ("Preparing", "Preparing"),
                            ("ReadyForPickup", "Ready for pickup"),
                            ("OutForDelivery", "Out for delivery"),
                            ("Completed", "Completed"),
                            ("Cancelled", "Cancelled"),
                        ],
                        default="Received",
                        max_length=20,
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "store",
                    models.ForeignKey(
                        help_text="Store where the order was placed",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="orders",
                        to="core.store",
                    ),
                ),
            ],
            options={
                "verbose_name": "Order",
                "verbose_name_plural": "Orders",
                "db_table": "orders",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["store", "-created_at"], name="order_store_date_idx"),
                    models.Index(fields=["payment_status"], name="order_payment_status_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the order item",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "quantity",
                    models.PositiveIntegerField(
                        help_text="Quantity ordered",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "unit_price",
                    money("Unit price at time of order (may differ from current price)"),
                ),
                ("total_price", money("Line total (quantity * unit_price)")),
                (
                    "order",
                    models.ForeignKey(
                        help_text="Order that this item belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="orders.order",
                    ),
                ),
                (
                    "variant",
                    models.ForeignKey(
                        help_text="Variant that was ordered",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="order_items",
                        to="inventory.productvariant",
                    ),
                ),
            ],
            options={
                "verbose_name": "Order Item",
                "verbose_name_plural": "Order Items",
                "db_table": "order_items",
            },
        ),
        migrations.CreateModel(
            name="OrderAppliedCharge",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the applied charge",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("amount_charged", money("Amount charged on this order")),
                (
                    "charge",
                    models.ForeignKey(
                        help_text="Charge that was applied",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="applications",
                        to="orders.charge",
                    ),
                ),
                (
                    "order",
                    models.ForeignKey(
                        help_text="Order the charge was applied to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applied_charges",
                        to="orders.order",
                    ),
                ),
            ],
            options={
                "verbose_name": "Order Applied Charge",
                "verbose_name_plural": "Order Applied Charges",
                "db_table": "order_applied_charges",
            },
        ),
    ]
