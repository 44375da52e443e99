"""
Views for charges and order checkout.

- Charge reference data for the checkout screen
- Order creation through OrderService, with errors mapped to the JSON envelope
- Live totals quote and order retrieval for invoice reprint
"""

from django.db import DEFAULT_DB_ALIAS

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .models import Charge
from .serializers import ChargeSerializer, OrderDetailSerializer
from .services import OrderService


def get_order_service():
    return OrderService(using=DEFAULT_DB_ALIAS)


def error_response(error):
    return Response(error.to_dict(), status=error.status_code)


class ChargeListView(generics.ListAPIView):
    """
    API endpoint listing charges.

    GET /api/charges
    """

    serializer_class = ChargeSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None

    def get_queryset(self):
        return Charge.objects.order_by("name")


@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def create_order(request):
    """
    Submit a new order.

    Request body:
    {
        "storeId": "uuid",
        "customer_name": "..." (optional),
        "customer_phone": "..." (optional),
        "aggregator_id": "..." (optional),
        "payment_method": "Cash|Card|UPI|Swiggy|Zomato|Other",
        "amount_received": 600.00 (required for Cash),
        "notes": "..." (optional),
        "items": [{"variantId": "uuid", "quantity": 2, "unit_price": 250.00}],
        "applied_charges": [{"chargeId": "uuid", "amount_charged": 20.00}] (optional)
    }

    Returns 201 with the persisted order, or the error envelope with the
    status of the failure.
    """
    result = get_order_service().submit(request.data)
    if not result.ok:
        return error_response(result.error)

    return Response(OrderDetailSerializer(result.order).data, status=status.HTTP_201_CREATED)


@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def quote_order(request):
    """
    Price an order payload without persisting it or touching inventory.

    Accepts the same body as order creation.
    """
    result = get_order_service().quote(request.data)
    if not result.ok:
        return error_response(result.error)

    totals = result.totals
    return Response(
        {
            "subtotal": totals.subtotal,
            "applied_charges_amount_taxable": totals.applied_charges_amount_taxable,
            "applied_charges_amount_nontaxable": totals.applied_charges_amount_nontaxable,
            "taxable_amount": totals.taxable_amount,
            "cgst_amount": totals.cgst_amount,
            "sgst_amount": totals.sgst_amount,
            "total_amount": totals.total_amount,
            "payment_status": result.payment.payment_status,
            "change_given": result.payment.change_given,
        },
        status=status.HTTP_200_OK,
    )


class OrderDetailView(generics.RetrieveAPIView):
    """
    API endpoint for retrieving a single order.

    GET /api/orders/<uuid>
    """

    serializer_class = OrderDetailSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        return get_order_service().orders()
