"""
Serializers for core models.
"""

from rest_framework import serializers

from .models import Store


class StoreSerializer(serializers.ModelSerializer):
    """Serializer for store reference data."""

    class Meta:
        model = Store
        fields = [
            "id",
            "name",
            "address",
            "phone_number",
            "gstin",
            "created_at",
            "updated_at",
        ]
