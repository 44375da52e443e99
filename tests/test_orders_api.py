"""
Tests for the order and charge API endpoints.

Verifies status codes, the JSON error envelope and the shape of the order
returned to the storefront.
"""

import uuid
from decimal import Decimal
from unittest.mock import patch

from django.urls import reverse

import pytest

from apps.inventory.models import Inventory
from apps.orders.models import Order
from apps.orders.services import OrderService


@pytest.mark.django_db
class TestChargeListAPI:
    def test_charges_sorted_by_name(self, api_client, taxable_charge, packaging_charge):
        response = api_client.get(reverse("orders:charge_list"))

        assert response.status_code == 200
        assert [charge["name"] for charge in response.json()] == [
            "Packaging Charge",
            "Service Charge",
        ]
        assert response.json()[0] == {
            "id": str(packaging_charge.id),
            "name": "Packaging Charge",
            "amount": 20.0,
            "is_taxable": False,
        }


@pytest.mark.django_db
class TestCreateOrderAPI:
    """Test POST /api/orders."""

    def test_create_order_returns_full_order(self, api_client, order_payload, store):
        response = api_client.post(reverse("orders:order_create"), order_payload(), format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["storeId"] == str(store.id)
        assert data["store"]["name"] == "Kompally Branch"
        assert data["subtotal"] == 500.0
        assert data["cgst_amount"] == 45.0
        assert data["sgst_amount"] == 45.0
        assert data["total_amount"] == 590.0
        assert data["payment_status"] == "Paid"
        assert data["order_status"] == "Received"
        assert data["applied_charges"] == []

        item = data["items"][0]
        assert item["orderId"] == data["id"]
        assert item["quantity"] == 2
        assert item["total_price"] == 500.0
        assert item["variant"]["name"] == "Regular"
        assert item["variant"]["product"]["name"] == "Classic Cheese Kunafa"
        assert Order.objects.filter(pk=data["id"]).exists()

    def test_create_cash_order(self, api_client, order_payload):
        response = api_client.post(
            reverse("orders:order_create"),
            order_payload(payment_method="Cash", amount_received=600),
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["change_given"] == 10.0

    def test_applied_charge_shape(self, api_client, order_payload, taxable_charge):
        response = api_client.post(
            reverse("orders:order_create"),
            order_payload(
                applied_charges=[{"chargeId": str(taxable_charge.id), "amount_charged": 50}]
            ),
            format="json",
        )

        assert response.status_code == 201
        applied = response.json()["applied_charges"][0]
        assert applied["chargeId"] == str(taxable_charge.id)
        assert applied["amount_charged"] == 50.0
        assert applied["charge"]["name"] == "Service Charge"
        assert response.json()["total_amount"] == 649.0

    def test_validation_error_envelope(self, api_client):
        response = api_client.post(reverse("orders:order_create"), {}, format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid order data provided."
        assert "items" in body["details"]

    def test_insufficient_amount(self, api_client, order_payload):
        response = api_client.post(
            reverse("orders:order_create"),
            order_payload(payment_method="Cash", amount_received=500),
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Amount received is less than total amount."
        assert Order.objects.count() == 0

    def test_missing_amount_received(self, api_client, order_payload):
        response = api_client.post(
            reverse("orders:order_create"), order_payload(payment_method="Cash"), format="json"
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Amount received must be provided."}

    def test_quantity_beyond_column_range(self, api_client, order_payload, untracked_variant):
        response = api_client.post(
            reverse("orders:order_create"),
            order_payload(
                items=[
                    {"variantId": str(untracked_variant.id), "quantity": 10**10, "unit_price": 250}
                ]
            ),
            format="json",
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid order data provided."
        assert "items" in body["details"]
        assert Order.objects.count() == 0

    def test_unknown_store(self, api_client, order_payload):
        response = api_client.post(
            reverse("orders:order_create"), order_payload(storeId=str(uuid.uuid4())), format="json"
        )

        assert response.status_code == 400
        assert "not found" in response.json()["error"]

    def test_insufficient_stock(self, api_client, order_payload, tracked_variant, inventory):
        response = api_client.post(
            reverse("orders:order_create"),
            order_payload(
                items=[{"variantId": str(tracked_variant.id), "quantity": 9, "unit_price": 400}]
            ),
            format="json",
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"].startswith("Insufficient stock for")
        assert body["details"]["available"] == 5
        assert body["details"]["requested"] == 9
        inventory.refresh_from_db()
        assert inventory.quantity == 5

    def test_timeout_maps_to_500(self, api_client, order_payload, tracked_variant, inventory):
        with patch("apps.orders.views.get_order_service", return_value=OrderService(timeout=0)):
            response = api_client.post(
                reverse("orders:order_create"),
                order_payload(
                    items=[{"variantId": str(tracked_variant.id), "quantity": 1, "unit_price": 400}]
                ),
                format="json",
            )

        assert response.status_code == 500
        assert response.json() == {"error": "Transaction failed or timed out."}
        assert Inventory.objects.get(pk=inventory.pk).quantity == 5

    def test_unexpected_error_maps_to_500(self, api_client, order_payload):
        with patch.object(OrderService, "_persist", side_effect=RuntimeError("boom")):
            response = api_client.post(
                reverse("orders:order_create"), order_payload(), format="json"
            )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create order."}

    def test_malformed_json(self, api_client):
        response = api_client.post(
            reverse("orders:order_create"), "{not json", content_type="application/json"
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_get_not_allowed(self, api_client):
        response = api_client.get(reverse("orders:order_create"))

        assert response.status_code == 405
        assert response.json() == {"error": 'Method "GET" not allowed.'}


@pytest.mark.django_db
class TestQuoteOrderAPI:
    def test_quote(self, api_client, order_payload):
        response = api_client.post(
            reverse("orders:order_quote"),
            order_payload(payment_method="Cash", amount_received=600),
            format="json",
        )

        assert response.status_code == 200
        assert response.json() == {
            "subtotal": 500.0,
            "applied_charges_amount_taxable": 0.0,
            "applied_charges_amount_nontaxable": 0.0,
            "taxable_amount": 500.0,
            "cgst_amount": 45.0,
            "sgst_amount": 45.0,
            "total_amount": 590.0,
            "payment_status": "Paid",
            "change_given": 10.0,
        }
        assert Order.objects.count() == 0

    def test_quote_validation_error(self, api_client):
        response = api_client.post(reverse("orders:order_quote"), {"items": []}, format="json")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid order data provided."


@pytest.mark.django_db
class TestOrderDetailAPI:
    def test_retrieve_order(self, api_client, order_payload):
        created = api_client.post(
            reverse("orders:order_create"), order_payload(), format="json"
        ).json()

        response = api_client.get(reverse("orders:order_detail", args=[created["id"]]))

        assert response.status_code == 200
        assert response.json() == created

    def test_unknown_order(self, api_client):
        response = api_client.get(reverse("orders:order_detail", args=[uuid.uuid4()]))

        assert response.status_code == 404
        assert response.json() == {"error": "Not found."}

    def test_total_matches_decimal_fields(self, api_client, order_payload):
        created = api_client.post(
            reverse("orders:order_create"), order_payload(), format="json"
        ).json()

        order = Order.objects.get(pk=created["id"])
        assert order.total_amount == Decimal(str(created["total_amount"]))
