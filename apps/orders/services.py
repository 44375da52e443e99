"""
Order submission service.

Turns a checkout payload into a persisted order:

1. Validate the payload (no database access on failure)
2. Look up charge taxability and compute totals
3. Resolve the payment status
4. In one atomic unit: resolve store and variants, lock and check inventory
   for tracked variants, insert the order with its items and applied
   charges, decrement inventory

``OrderService.submit`` never raises for business failures: it returns an
``OrderResult`` holding either the order or an ``OrderError``.
"""

import logging
import time
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Mapping, Optional

from django.conf import settings
from django.db import (
    DEFAULT_DB_ALIAS,
    IntegrityError,
    OperationalError,
    connections,
    transaction,
)
from django.db.models import Prefetch

from apps.core.models import Store
from apps.inventory.models import Inventory, ProductVariant

from .errors import (
    ChargeNotFound,
    InsufficientAmount,
    InsufficientStock,
    MissingAmountReceived,
    OrderError,
    OrderValidationError,
    ReferenceNotFound,
    TransactionTimeout,
    UnexpectedOrderError,
)
from .models import (
    MAX_MONEY_AMOUNT,
    Charge,
    Order,
    OrderAppliedCharge,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)
from .serializers import OrderCreateSerializer

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")

# SQLSTATE raised by PostgreSQL when statement_timeout cancels a query
QUERY_CANCELED = "57014"

# SQLite reports a busy timeout on a write lock with this message
SQLITE_LOCKED_MESSAGE = "database is locked"

# Settled by the card terminal, UPI app or aggregator before the order reaches us
EXTERNALLY_SETTLED_METHODS = frozenset(
    {
        PaymentMethod.CARD,
        PaymentMethod.UPI,
        PaymentMethod.SWIGGY,
        PaymentMethod.ZOMATO,
        PaymentMethod.OTHER,
    }
)


def round_money(amount: Decimal) -> Decimal:
    """Round half up to two decimal places."""
    return Decimal(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    applied_charges_amount_taxable: Decimal
    applied_charges_amount_nontaxable: Decimal
    taxable_amount: Decimal
    cgst_amount: Decimal
    sgst_amount: Decimal
    total_amount: Decimal


@dataclass(frozen=True)
class PaymentResolution:
    payment_status: str
    change_given: Optional[Decimal] = None


@dataclass
class OrderResult:
    """Outcome of a submission or quote: ``error`` is set exactly when it failed."""

    order: Optional[Order] = None
    totals: Optional[OrderTotals] = None
    payment: Optional[PaymentResolution] = None
    error: Optional[OrderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def calculate_totals(
    items: Iterable[Mapping],
    applied_charges: Iterable[Mapping],
    taxable_flags: Mapping,
    tax_rates: Optional[Mapping[str, Decimal]] = None,
) -> OrderTotals:
    """
    Compute the monetary fields of an order.

    Args:
        items: lines with ``unit_price`` and ``quantity``
        applied_charges: charges with ``charge_id`` and ``amount_charged``
        taxable_flags: ``is_taxable`` per charge id, as currently stored
        tax_rates: ``{"CGST": rate, "SGST": rate}``, defaults to settings

    Only the tax and grand total fields are rounded; line amounts are summed
    unrounded.

    Raises:
        ChargeNotFound: if an applied charge id is not in ``taxable_flags``
    """
    rates = tax_rates or settings.ORDER_TAX_RATES

    subtotal = sum((item["unit_price"] * item["quantity"] for item in items), ZERO)

    taxable_charges = ZERO
    nontaxable_charges = ZERO
    for applied in applied_charges:
        charge_id = applied["charge_id"]
        if charge_id not in taxable_flags:
            raise ChargeNotFound(charge_id)
        if taxable_flags[charge_id]:
            taxable_charges += applied["amount_charged"]
        else:
            nontaxable_charges += applied["amount_charged"]

    taxable_amount = subtotal + taxable_charges
    cgst_amount = round_money(taxable_amount * rates["CGST"])
    sgst_amount = round_money(taxable_amount * rates["SGST"])
    total_amount = round_money(taxable_amount + cgst_amount + sgst_amount + nontaxable_charges)

    return OrderTotals(
        subtotal=subtotal,
        applied_charges_amount_taxable=taxable_charges,
        applied_charges_amount_nontaxable=nontaxable_charges,
        taxable_amount=taxable_amount,
        cgst_amount=cgst_amount,
        sgst_amount=sgst_amount,
        total_amount=total_amount,
    )


def resolve_payment(
    payment_method: str, amount_received: Optional[Decimal], total_amount: Decimal
) -> PaymentResolution:
    """
    Decide the payment status of a new order.

    Cash must cover the total and yields change. Every other known method is
    settled outside this system. Unknown methods stay pending.

    Raises:
        MissingAmountReceived: cash payment without ``amount_received``
        InsufficientAmount: cash payment below the total
    """
    if payment_method == PaymentMethod.CASH:
        if amount_received is None:
            raise MissingAmountReceived()
        if amount_received < total_amount:
            raise InsufficientAmount(
                details={
                    "amount_received": str(amount_received),
                    "total_amount": str(total_amount),
                }
            )
        return PaymentResolution(
            payment_status=PaymentStatus.PAID,
            change_given=round_money(amount_received - total_amount),
        )

    if payment_method in EXTERNALLY_SETTLED_METHODS:
        return PaymentResolution(payment_status=PaymentStatus.PAID)

    return PaymentResolution(payment_status=PaymentStatus.PENDING)


class OrderService:
    """
    Order submission against one database.

    Args:
        using: database alias every query runs against
        timeout: seconds the atomic unit may take, defaults to
            ``settings.ORDER_TRANSACTION_TIMEOUT``
        tax_rates: overrides ``settings.ORDER_TAX_RATES``
    """

    def __init__(self, using=DEFAULT_DB_ALIAS, timeout=None, tax_rates=None):
        self.using = using
        self.timeout = settings.ORDER_TRANSACTION_TIMEOUT if timeout is None else timeout
        self.tax_rates = tax_rates or settings.ORDER_TAX_RATES

    def orders(self):
        """Orders with everything the detail serializer renders."""
        return (
            Order.objects.using(self.using)
            .select_related("store")
            .prefetch_related(
                Prefetch(
                    "items",
                    queryset=OrderItem.objects.using(self.using).select_related(
                        "variant__product"
                    ),
                ),
                Prefetch(
                    "applied_charges",
                    queryset=OrderAppliedCharge.objects.using(self.using).select_related(
                        "charge"
                    ),
                ),
            )
        )

    def quote(self, payload) -> OrderResult:
        """Validate and price a payload without touching inventory or persisting."""
        try:
            data = self._validate(payload)
            totals, payment = self._price(data)
        except OrderError as exc:
            return OrderResult(error=exc)
        return OrderResult(totals=totals, payment=payment)

    def submit(self, payload) -> OrderResult:
        """
        Validate, price and persist an order.

        Returns an ``OrderResult`` whose ``order`` is the persisted order with
        store, items (with variant and product) and applied charges loaded.
        On any failure nothing is written and ``error`` describes why.
        """
        try:
            data = self._validate(payload)
            totals, payment = self._price(data)
            order = self._persist(data, totals, payment)
            order = self.orders().get(pk=order.pk)
        except OrderError as exc:
            logger.warning(f"Order rejected: {exc}")
            return OrderResult(error=exc)
        except Exception as exc:
            logger.error(f"Order creation failed: {exc}", exc_info=True)
            return OrderResult(error=UnexpectedOrderError())

        logger.info(
            f"Order {order.pk} created at store {order.store_id}: "
            f"total={order.total_amount} method={order.payment_method} "
            f"status={order.payment_status}"
        )
        return OrderResult(order=order, totals=totals, payment=payment)

    # Steps

    def _validate(self, payload):
        serializer = OrderCreateSerializer(data=payload)
        if not serializer.is_valid():
            raise OrderValidationError(details=serializer.errors)
        data = serializer.validated_data
        data.setdefault("applied_charges", [])
        return data

    def _price(self, data):
        applied_charges = data["applied_charges"]
        taxable_flags = {}
        if applied_charges:
            charge_ids = {applied["charge_id"] for applied in applied_charges}
            taxable_flags = dict(
                Charge.objects.using(self.using)
                .filter(id__in=charge_ids)
                .values_list("id", "is_taxable")
            )

        totals = calculate_totals(data["items"], applied_charges, taxable_flags, self.tax_rates)
        self._check_amounts(totals)
        payment = resolve_payment(
            data["payment_method"], data.get("amount_received"), totals.total_amount
        )
        return totals, payment

    def _check_amounts(self, totals: OrderTotals):
        """Reject totals that tax pushed past what a money column stores."""
        errors = {
            name: [f"Ensure this value is less than or equal to {MAX_MONEY_AMOUNT}."]
            for name, amount in asdict(totals).items()
            if amount > MAX_MONEY_AMOUNT
        }
        if errors:
            raise OrderValidationError(details=errors)

    def _persist(self, data, totals: OrderTotals, payment: PaymentResolution) -> Order:
        deadline = time.monotonic() + self.timeout
        try:
            with transaction.atomic(using=self.using):
                self._apply_statement_timeout(deadline)

                store = self._get_store(data["store_id"])
                variants = self._get_variants(data["items"])
                required = self._required_stock(data["items"], variants)
                self._check_stock(store, required, variants)
                self._check_deadline(deadline)

                order = Order.objects.using(self.using).create(
                    store=store,
                    customer_name=data.get("customer_name"),
                    customer_phone=data.get("customer_phone"),
                    aggregator_id=data.get("aggregator_id"),
                    payment_method=data["payment_method"],
                    amount_received=data.get("amount_received"),
                    change_given=payment.change_given,
                    payment_status=payment.payment_status,
                    order_status=OrderStatus.RECEIVED,
                    notes=data.get("notes"),
                    subtotal=totals.subtotal,
                    applied_charges_amount_taxable=totals.applied_charges_amount_taxable,
                    applied_charges_amount_nontaxable=totals.applied_charges_amount_nontaxable,
                    taxable_amount=totals.taxable_amount,
                    cgst_amount=totals.cgst_amount,
                    sgst_amount=totals.sgst_amount,
                    total_amount=totals.total_amount,
                )
                OrderItem.objects.using(self.using).bulk_create(
                    [
                        OrderItem(
                            order=order,
                            variant=variants[item["variant_id"]],
                            quantity=item["quantity"],
                            unit_price=item["unit_price"],
                            total_price=round_money(item["unit_price"] * item["quantity"]),
                        )
                        for item in data["items"]
                    ]
                )
                OrderAppliedCharge.objects.using(self.using).bulk_create(
                    [
                        OrderAppliedCharge(
                            order=order,
                            charge_id=applied["charge_id"],
                            amount_charged=applied["amount_charged"],
                        )
                        for applied in data["applied_charges"]
                    ]
                )

                self._deduct_stock(store, required, variants)
                self._check_deadline(deadline)
        except OperationalError as exc:
            if _is_lock_timeout(exc) or time.monotonic() >= deadline:
                raise TransactionTimeout() from exc
            raise
        except IntegrityError as exc:
            raise ReferenceNotFound() from exc

        return order

    # Atomic unit helpers

    def _apply_statement_timeout(self, deadline):
        connection = connections[self.using]
        if connection.vendor != "postgresql":
            return
        remaining_ms = max(1, int((deadline - time.monotonic()) * 1000))
        with connection.cursor() as cursor:
            cursor.execute(f"SET LOCAL statement_timeout = {remaining_ms}")

    def _check_deadline(self, deadline):
        if time.monotonic() >= deadline:
            raise TransactionTimeout()

    def _get_store(self, store_id) -> Store:
        try:
            return Store.objects.using(self.using).get(pk=store_id)
        except Store.DoesNotExist:
            raise ReferenceNotFound(f"Store with ID {store_id} not found.")

    def _get_variants(self, items) -> Dict:
        variant_ids = {item["variant_id"] for item in items}
        variants = ProductVariant.objects.using(self.using).select_related("product").in_bulk(
            variant_ids
        )
        for variant_id in variant_ids:
            if variant_id not in variants:
                raise ReferenceNotFound(f"Variant with ID {variant_id} not found.")
        return variants

    def _required_stock(self, items, variants) -> Dict:
        """Requested quantity per tracked variant, in a stable lock order."""
        required = {}
        for item in items:
            variant_id = item["variant_id"]
            if variants[variant_id].is_tracked:
                required[variant_id] = required.get(variant_id, 0) + item["quantity"]
        return dict(sorted(required.items(), key=lambda entry: str(entry[0])))

    def _check_stock(self, store, required, variants):
        """Lock the inventory rows of tracked variants and verify they cover the order."""
        if not required:
            return
        rows = {
            row.variant_id: row
            for row in Inventory.objects.using(self.using)
            .select_for_update()
            .filter(store=store, variant_id__in=list(required))
            .order_by("variant_id")
        }
        for variant_id, requested in required.items():
            row = rows.get(variant_id)
            if row is None or not row.can_deduct_quantity(requested):
                raise InsufficientStock(
                    variant_id,
                    available=row.quantity if row else 0,
                    requested=requested,
                    variant_name=str(variants[variant_id]),
                )

    def _deduct_stock(self, store, required, variants):
        for variant_id, requested in required.items():
            rows = Inventory.objects.using(self.using).filter(store=store, variant_id=variant_id)
            if rows.deduct(requested) != 1:
                row = rows.first()
                raise InsufficientStock(
                    variant_id,
                    available=row.quantity if row else 0,
                    requested=requested,
                    variant_name=str(variants[variant_id]),
                )


def _is_lock_timeout(exc) -> bool:
    """Whether the database gave up waiting: a canceled statement or a locked SQLite file."""
    cause = exc.__cause__
    if QUERY_CANCELED in (getattr(cause, "pgcode", None), getattr(cause, "sqlstate", None)):
        return True
    return SQLITE_LOCKED_MESSAGE in str(exc)
