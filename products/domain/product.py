"""
Product domain entity.

This is the core domain entity representing a catalog product.
It is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Tuple

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
MAX_IMAGES = 5


class Category(str, Enum):
    """Fixed set of product categories."""

    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    FOOD = "Food"
    BOOKS = "Books"
    HOME = "Home"
    SPORTS = "Sports"
    TOYS = "Toys"
    OTHER = "Other"


CATEGORY_VALUES = [category.value for category in Category]


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Immutable snapshot of a stored product. Identity and timestamps
    are assigned by the store.
    """

    id: uuid.UUID
    name: str
    description: str
    price: float
    stock: int
    category: Category
    images: Tuple[str, ...]
    featured: bool
    created_at: datetime
    updated_at: datetime

    def toggle_featured(self) -> "Product":
        """
        Create a new Product instance with the featured flag flipped.

        Returns:
            New Product instance
        """
        return replace(self, featured=not self.featured)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-serializable snapshot of the product."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
            "category": self.category.value,
            "images": list(self.images),
            "featured": self.featured,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
