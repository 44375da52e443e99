import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Store",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the store",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(help_text="Store name", max_length=255, unique=True),
                ),
                (
                    "address",
                    models.TextField(blank=True, help_text="Store address", null=True),
                ),
                (
                    "phone_number",
                    models.CharField(
                        blank=True, help_text="Store phone number", max_length=20, null=True
                    ),
                ),
                (
                    "gstin",
                    models.CharField(
                        blank=True,
                        help_text="GST identification number printed on invoices",
                        max_length=15,
                        null=True,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Store",
                "verbose_name_plural": "Stores",
                "db_table": "stores",
                "ordering": ["name"],
            },
        ),
    ]
