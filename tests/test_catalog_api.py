"""
Tests for the read-only catalog endpoints, the welcome route and health checks.
"""

from decimal import Decimal
from unittest.mock import patch

from django.db import DatabaseError
from django.urls import reverse

import pytest

from apps.core.models import Store
from apps.inventory.models import Category, Product, ProductVariant


@pytest.mark.django_db
class TestWelcome:
    def test_welcome_banner(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/plain")
        assert response.content.decode() == "Welcome to Kunafa Kingdom API!"

    def test_welcome_rejects_post(self, client):
        response = client.post("/")

        assert response.status_code == 405


@pytest.mark.django_db
class TestStoreListAPI:
    def test_stores_sorted_by_name(self, api_client):
        Store.objects.create(name="Kondapur Branch")
        Store.objects.create(name="AS Rao Nagar Branch")
        Store.objects.create(name="Kompally Branch", phone_number="9876543210")

        response = api_client.get(reverse("core:store_list"))

        assert response.status_code == 200
        data = response.json()
        assert [store["name"] for store in data] == [
            "AS Rao Nagar Branch",
            "Kompally Branch",
            "Kondapur Branch",
        ]
        assert data[1]["phone_number"] == "9876543210"

    def test_empty_list(self, api_client):
        response = api_client.get(reverse("core:store_list"))

        assert response.status_code == 200
        assert response.json() == []

    def test_post_not_allowed(self, api_client):
        response = api_client.post(reverse("core:store_list"), {}, format="json")

        assert response.status_code == 405
        assert response.json() == {"error": 'Method "POST" not allowed.'}


@pytest.mark.django_db
class TestCategoryListAPI:
    def test_categories_sorted_by_name(self, api_client):
        for name in ["Kunafa", "Beverages", "Baklava"]:
            Category.objects.create(name=name)

        response = api_client.get(reverse("inventory:category_list"))

        assert response.status_code == 200
        assert [category["name"] for category in response.json()] == [
            "Baklava",
            "Beverages",
            "Kunafa",
        ]


@pytest.mark.django_db
class TestProductListAPI:
    """Test GET /api/products."""

    @pytest.fixture
    def menu(self, category, product, untracked_variant):
        ProductVariant.objects.create(product=product, name="Large", price=Decimal("450.00"))
        Product.objects.create(name="Nutella Kunafa", category=category)
        Product.objects.create(name="Archived Kunafa", category=category, is_active=False)
        return product

    def test_only_active_products_sorted_by_name(self, api_client, menu):
        response = api_client.get(reverse("inventory:product_list"))

        assert response.status_code == 200
        assert [product["name"] for product in response.json()] == [
            "Classic Cheese Kunafa",
            "Nutella Kunafa",
        ]

    def test_product_shape(self, api_client, menu, category):
        response = api_client.get(reverse("inventory:product_list"))

        product = response.json()[0]
        assert product["categoryId"] == str(category.id)
        assert product["category"] == {"id": str(category.id), "name": "Kunafa"}
        assert [variant["name"] for variant in product["variants"]] == ["Large", "Regular"]

        regular = product["variants"][1]
        assert regular["price"] == 250.0
        assert regular["sku"] == "KUN-CLS-REG"
        assert regular["inventory_tracking_method"] == "Untracked"
        assert regular["productId"] == product["id"]

    def test_repeated_reads_are_identical(self, api_client, menu):
        first = api_client.get(reverse("inventory:product_list")).json()
        second = api_client.get(reverse("inventory:product_list")).json()

        assert first == second

    def test_product_without_variants(self, api_client, menu):
        response = api_client.get(reverse("inventory:product_list"))

        nutella = response.json()[1]
        assert nutella["variants"] == []

    def test_database_error_is_enveloped(self, api_client):
        with patch(
            "apps.inventory.views.ProductListView.get_queryset",
            side_effect=DatabaseError("connection lost"),
        ):
            response = api_client.get(reverse("inventory:product_list"))

        assert response.status_code == 500
        assert response.json() == {"error": "An unexpected error occurred."}


@pytest.mark.django_db
class TestHealthChecks:
    def test_health(self, client):
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["environment"] == "test"

    def test_detailed_health(self, client):
        response = client.get(reverse("health_detailed"))

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"

    def test_detailed_health_database_down(self, client):
        with patch("apps.core.health._check_database", side_effect=DatabaseError("down")):
            response = client.get(reverse("health_detailed"))

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    def test_liveness(self, client):
        assert client.get(reverse("liveness")).json() == {"status": "alive"}

    def test_readiness(self, client):
        assert client.get(reverse("readiness")).json() == {"status": "ready"}

    def test_readiness_database_down(self, client):
        with patch("apps.core.health._check_database", side_effect=DatabaseError("down")):
            response = client.get(reverse("readiness"))

        assert response.status_code == 503


def test_metrics_endpoint(client):
    response = client.get("/metrics")

    assert response.status_code == 200
    assert b"django_http_requests" in response.content
