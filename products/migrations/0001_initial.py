import uuid

import django.core.validators
from django.db import migrations, models

import products.infrastructure.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        max_length=100,
                        unique=True,
                        validators=[django.core.validators.MinLengthValidator(3)],
                    ),
                ),
                ("description", models.TextField(max_length=1000)),
                (
                    "price",
                    models.FloatField(validators=[django.core.validators.MinValueValidator(0)]),
                ),
                ("stock", models.PositiveIntegerField(default=0)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Electronics", "Electronics"),
                            ("Clothing", "Clothing"),
                            ("Food", "Food"),
                            ("Books", "Books"),
                            ("Home", "Home"),
                            ("Sports", "Sports"),
                            ("Toys", "Toys"),
                            ("Other", "Other"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "images",
                    models.JSONField(
                        blank=True,
                        default=list,
                        validators=[products.infrastructure.models.validate_image_list],
                    ),
                ),
                ("featured", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["category"], name="products_category_idx"),
                    models.Index(fields=["price"], name="products_price_idx"),
                    models.Index(fields=["featured"], name="products_featured_idx"),
                ],
            },
        ),
    ]
