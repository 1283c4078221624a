"""
Django admin configuration for products app.
"""

from django.contrib import admin

from products.infrastructure.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "category", "price", "stock", "image_count", "featured", "created_at"]
    list_filter = ["category", "featured", "created_at"]
    search_fields = ["name", "description"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "description", "category"),
            },
        ),
        (
            "Inventory",
            {
                "fields": ("price", "stock", "featured", "images"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    @admin.display(description="Images")
    def image_count(self, obj):
        """Display number of images for this product."""
        return len(obj.images or [])
