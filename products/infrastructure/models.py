"""
Product model.
"""
import uuid

from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from products.domain.product import (
    CATEGORY_VALUES,
    DESCRIPTION_MAX_LENGTH,
    MAX_IMAGES,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)


def validate_image_list(value):
    """Images must be a list of at most MAX_IMAGES strings."""
    if not isinstance(value, list) or not all(isinstance(image, str) for image in value):
        raise ValidationError("Images must be a list of strings", code="invalid")
    if len(value) > MAX_IMAGES:
        raise ValidationError(
            f"Cannot upload more than {MAX_IMAGES} images per product", code="max_length"
        )


class Product(models.Model):
    """
    Represents a catalog product (e.g., Wireless Mouse, Cotton T-Shirt).
    Product names are unique across the catalog.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        unique=True,
        validators=[MinLengthValidator(NAME_MIN_LENGTH)],
    )
    description = models.TextField(max_length=DESCRIPTION_MAX_LENGTH)
    price = models.FloatField(validators=[MinValueValidator(0)])
    stock = models.PositiveIntegerField(default=0)
    category = models.CharField(
        max_length=20,
        choices=[(value, value) for value in CATEGORY_VALUES],
    )
    images = models.JSONField(default=list, blank=True, validators=[validate_image_list])
    featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
            models.Index(fields=["price"], name="products_price_idx"),
            models.Index(fields=["featured"], name="products_featured_idx"),
        ]

    def clean_fields(self, exclude=None):
        """Trim text fields before they are validated."""
        if isinstance(self.name, str):
            self.name = self.name.strip()
        if isinstance(self.description, str):
            self.description = self.description.strip()
        super().clean_fields(exclude=exclude)

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
