"""
Serializers for the orders app.

- Input serializers validate the checkout payload sent by the storefront
- Output serializers render an order with its items, charges and store
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.serializers import StoreSerializer
from apps.inventory.serializers import ProductVariantDetailSerializer

from .models import (
    MAX_ITEM_QUANTITY,
    MAX_MONEY_AMOUNT,
    Charge,
    Order,
    OrderAppliedCharge,
    OrderItem,
    PaymentMethod,
)

ZERO = Decimal("0.00")


class ChargeSerializer(serializers.ModelSerializer):
    """Serializer for Charge reference data."""

    class Meta:
        model = Charge
        fields = ["id", "name", "amount", "is_taxable"]


class OrderItemCreateSerializer(serializers.Serializer):
    """One line of the checkout payload."""

    variantId = serializers.UUIDField(source="variant_id")
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_ITEM_QUANTITY)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=ZERO)


class AppliedChargeCreateSerializer(serializers.Serializer):
    """One applied charge of the checkout payload."""

    chargeId = serializers.UUIDField(source="charge_id")
    amount_charged = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=ZERO)


class OrderCreateSerializer(serializers.Serializer):
    """
    Checkout payload.

    Validation is purely structural: references (store, variants, charges)
    are resolved by the order service.
    """

    storeId = serializers.UUIDField(source="store_id")
    customer_name = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True
    )
    customer_phone = serializers.CharField(
        max_length=20, required=False, allow_blank=True, allow_null=True
    )
    aggregator_id = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True
    )
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)
    amount_received = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    items = OrderItemCreateSerializer(many=True)
    applied_charges = AppliedChargeCreateSerializer(many=True, required=False)

    def validate_items(self, value):
        """Validate that at least one item is provided."""
        if not value:
            raise serializers.ValidationError("Order must have at least one item.")
        return value

    def validate(self, attrs):
        """Validate that line totals and the pre-tax total fit a money column."""
        errors = {}

        line_totals = [item["unit_price"] * item["quantity"] for item in attrs["items"]]
        for index, line_total in enumerate(line_totals):
            if line_total > MAX_MONEY_AMOUNT:
                errors.setdefault("items", []).append(
                    f"Item {index + 1} total {line_total} exceeds the maximum "
                    f"amount of {MAX_MONEY_AMOUNT}."
                )

        charges_total = sum(
            (applied["amount_charged"] for applied in attrs.get("applied_charges", [])), ZERO
        )
        if not errors and sum(line_totals, ZERO) + charges_total > MAX_MONEY_AMOUNT:
            errors["non_field_errors"] = [
                f"Order total exceeds the maximum amount of {MAX_MONEY_AMOUNT}."
            ]

        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class OrderItemSerializer(serializers.ModelSerializer):
    """Order line joined to its variant and product."""

    orderId = serializers.UUIDField(source="order_id", read_only=True)
    variantId = serializers.UUIDField(source="variant_id", read_only=True)
    variant = ProductVariantDetailSerializer(read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "quantity",
            "unit_price",
            "total_price",
            "orderId",
            "variantId",
            "variant",
        ]


class OrderAppliedChargeSerializer(serializers.ModelSerializer):
    """Applied charge joined to its charge."""

    orderId = serializers.UUIDField(source="order_id", read_only=True)
    chargeId = serializers.UUIDField(source="charge_id", read_only=True)
    charge = ChargeSerializer(read_only=True)

    class Meta:
        model = OrderAppliedCharge
        fields = ["id", "amount_charged", "orderId", "chargeId", "charge"]


class OrderDetailSerializer(serializers.ModelSerializer):
    """Full order as returned after checkout and on invoice reprint."""

    storeId = serializers.UUIDField(source="store_id", read_only=True)
    store = StoreSerializer(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    applied_charges = OrderAppliedChargeSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "storeId",
            "customer_name",
            "customer_phone",
            "aggregator_id",
            "subtotal",
            "applied_charges_amount_taxable",
            "applied_charges_amount_nontaxable",
            "discount_amount",
            "taxable_amount",
            "cgst_amount",
            "sgst_amount",
            "total_amount",
            "payment_method",
            "amount_received",
            "change_given",
            "payment_status",
            "order_status",
            "notes",
            "created_at",
            "updated_at",
            "store",
            "items",
            "applied_charges",
        ]
