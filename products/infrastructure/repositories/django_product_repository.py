"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models,
and translates store errors into domain exceptions.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional, Sequence

from asgiref.sync import sync_to_async
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import Q, QuerySet

from core.domain.exceptions import (
    DuplicateProductNameError,
    PersistenceError,
    ProductNotFoundError,
)
from core.infrastructure.database import ensure_database_connection
from products.domain.product import Category, Product
from products.domain.product_filter import NEWEST_FIRST, ProductFilter
from products.ports.product_repository import ProductRepository
from products.infrastructure.models import Product as ProductModel

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = ("name", "description", "price", "stock", "category", "images", "featured")


def _parse_id(product_id: Any) -> Optional[uuid.UUID]:
    """Return the UUID for a product id, or None if it cannot be one."""
    if isinstance(product_id, uuid.UUID):
        return product_id
    try:
        return uuid.UUID(str(product_id))
    except (TypeError, ValueError, AttributeError):
        return None


def _is_duplicate_name(exc: Exception) -> bool:
    """Whether a store error is the unique-name violation."""
    if isinstance(exc, ValidationError):
        if not hasattr(exc, "error_dict"):
            return False
        return any(error.code == "unique" for error in exc.error_dict.get("name", []))
    message = str(exc).lower()
    return ("unique" in message or "duplicate" in message) and "name" in message


def _write(model: ProductModel) -> None:
    """Save a model, translating store errors into domain exceptions."""
    try:
        with transaction.atomic():
            model.save()
    except (ValidationError, IntegrityError) as e:
        if _is_duplicate_name(e):
            raise DuplicateProductNameError() from e
        if isinstance(e, ValidationError):
            raise PersistenceError("; ".join(e.messages), cause=e) from e
        raise


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Builds querysets from listing filters
    3. Implements repository interface
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=model.price,
            stock=model.stock,
            category=Category(model.category),
            images=tuple(model.images or ()),
            featured=model.featured,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _filter_queryset(self, product_filter: ProductFilter) -> QuerySet:
        """
        Build the queryset matching a listing filter.

        Args:
            product_filter: Listing filter

        Returns:
            Filtered queryset
        """
        queryset = ProductModel.objects.all()
        if product_filter.is_empty:
            return queryset
        if product_filter.search:
            queryset = queryset.filter(
                Q(name__icontains=product_filter.search)
                | Q(description__icontains=product_filter.search)
            )
        if product_filter.category:
            queryset = queryset.filter(category=product_filter.category)
        return queryset

    async def ensure_connection(self) -> None:
        """Make sure the database is reachable."""
        await ensure_database_connection()

    @sync_to_async
    def create(self, payload: Dict[str, Any]) -> Product:
        """
        Create a product from a validated payload.

        Args:
            payload: Fully populated product fields

        Returns:
            Created product entity
        """
        model = ProductModel(**{key: payload[key] for key in WRITABLE_FIELDS if key in payload})
        _write(model)
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, product_id: Any) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product ID

        Returns:
            Product entity or None if not found
        """
        parsed_id = _parse_id(product_id)
        if parsed_id is None:
            return None
        try:
            model = ProductModel.objects.get(id=parsed_id)
            return self._to_domain(model)
        except ProductModel.DoesNotExist:
            return None

    @sync_to_async
    def find_by_id_and_update(
        self, product_id: Any, payload: Dict[str, Any]
    ) -> Optional[Product]:
        """
        Atomically merge a partial payload into a product and re-validate it.

        Args:
            product_id: Product ID
            payload: Fields to change

        Returns:
            Updated product entity or None if not found
        """
        parsed_id = _parse_id(product_id)
        if parsed_id is None:
            return None
        with transaction.atomic():
            model = ProductModel.objects.select_for_update().filter(id=parsed_id).first()
            if model is None:
                return None
            for key in WRITABLE_FIELDS:
                if key in payload:
                    setattr(model, key, payload[key])
            _write(model)
        return self._to_domain(model)

    @sync_to_async
    def find_by_id_and_delete(self, product_id: Any) -> Optional[Product]:
        """
        Delete a product by ID.

        Args:
            product_id: Product ID

        Returns:
            Deleted product entity or None if not found
        """
        parsed_id = _parse_id(product_id)
        if parsed_id is None:
            return None
        with transaction.atomic():
            model = ProductModel.objects.select_for_update().filter(id=parsed_id).first()
            if model is None:
                return None
            product = self._to_domain(model)
            model.delete()
        return product

    @sync_to_async
    def find(
        self,
        product_filter: ProductFilter,
        sort: Sequence[str] = NEWEST_FIRST,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Product]:
        """
        List products matching a filter.

        Args:
            product_filter: Listing filter
            sort: Sort fields, "-" prefix for descending
            skip: Number of matches to skip
            limit: Maximum number of products (None for all)

        Returns:
            List of Product entities
        """
        queryset = self._filter_queryset(product_filter).order_by(*sort)
        if limit is None:
            models = queryset[skip:]
        else:
            models = queryset[skip : skip + limit]
        return [self._to_domain(model) for model in models]

    @sync_to_async
    def count_documents(self, product_filter: ProductFilter) -> int:
        """
        Count products matching a filter.

        Args:
            product_filter: Listing filter

        Returns:
            Number of matching products
        """
        return self._filter_queryset(product_filter).count()

    @sync_to_async
    def save(self, product: Product) -> Product:
        """
        Persist changes to an existing product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        with transaction.atomic():
            model = ProductModel.objects.select_for_update().filter(id=product.id).first()
            if model is None:
                raise ProductNotFoundError(f"Product {product.id} not found")
            model.name = product.name
            model.description = product.description
            model.price = product.price
            model.stock = product.stock
            model.category = product.category.value
            model.images = list(product.images)
            model.featured = product.featured
            _write(model)
        logger.debug("Saved product %s", product.id)
        return self._to_domain(model)
