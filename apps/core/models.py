"""
Core models for the Kunafa Kingdom POS backend.
"""

import uuid

from django.db import models


class Store(models.Model):
    """
    Store (branch) where orders are taken.

    Stores are reference data: every order is placed against exactly one
    store and per-store inventory is kept for tracked variants.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the store",
    )

    name = models.CharField(max_length=255, unique=True, help_text="Store name")

    address = models.TextField(blank=True, null=True, help_text="Store address")

    phone_number = models.CharField(
        max_length=20, blank=True, null=True, help_text="Store phone number"
    )

    gstin = models.CharField(
        max_length=15,
        blank=True,
        null=True,
        help_text="GST identification number printed on invoices",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "stores"
        ordering = ["name"]
        verbose_name = "Store"
        verbose_name_plural = "Stores"

    def __str__(self):
        return self.name
