"""
Pytest configuration and shared fixtures.
"""

import uuid
from dataclasses import replace
from typing import Any, Dict, List, Optional

import pytest
from asgiref.sync import async_to_sync
from django.core.cache import cache
from django.utils import timezone

from core.domain.exceptions import DuplicateProductNameError, ProductNotFoundError
from core.infrastructure.cache import ViewCachePort
from products.application.services.product_cache_service import ProductCacheService
from products.domain.product import Category, Product
from products.domain.product_filter import NEWEST_FIRST, ProductFilter
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from products.ports.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """ProductRepository keeping products in a dict, for handler unit tests."""

    def __init__(self):
        self.products: Dict[uuid.UUID, Product] = {}
        self.calls: List[str] = []
        self.fail_with: Optional[Exception] = None

    def _check(self, call: str) -> None:
        self.calls.append(call)
        if self.fail_with is not None:
            raise self.fail_with

    def _parse(self, product_id: Any) -> Optional[uuid.UUID]:
        try:
            return uuid.UUID(str(product_id))
        except ValueError:
            return None

    def _assert_unique(self, name: str, exclude: Optional[uuid.UUID] = None) -> None:
        for product in self.products.values():
            if product.name == name and product.id != exclude:
                raise DuplicateProductNameError()

    async def ensure_connection(self) -> None:
        self.calls.append("ensure_connection")

    async def create(self, payload: Dict[str, Any]) -> Product:
        self._check("create")
        self._assert_unique(payload["name"])
        now = timezone.now()
        product = Product(
            id=uuid.uuid4(),
            name=payload["name"],
            description=payload["description"],
            price=payload["price"],
            stock=payload.get("stock", 0),
            category=Category(payload["category"]),
            images=tuple(payload.get("images", ())),
            featured=payload.get("featured", False),
            created_at=now,
            updated_at=now,
        )
        self.products[product.id] = product
        return product

    async def find_by_id(self, product_id: Any) -> Optional[Product]:
        self._check("find_by_id")
        return self.products.get(self._parse(product_id))

    async def find_by_id_and_update(
        self, product_id: Any, payload: Dict[str, Any]
    ) -> Optional[Product]:
        self._check("find_by_id_and_update")
        product = self.products.get(self._parse(product_id))
        if product is None:
            return None
        if "name" in payload:
            self._assert_unique(payload["name"], exclude=product.id)
        changes = dict(payload)
        if "category" in changes:
            changes["category"] = Category(changes["category"])
        if "images" in changes:
            changes["images"] = tuple(changes["images"])
        updated = replace(product, updated_at=timezone.now(), **changes)
        self.products[updated.id] = updated
        return updated

    async def find_by_id_and_delete(self, product_id: Any) -> Optional[Product]:
        self._check("find_by_id_and_delete")
        return self.products.pop(self._parse(product_id), None)

    def _matching(self, product_filter: ProductFilter) -> List[Product]:
        search = product_filter.search.lower()
        return [
            product
            for product in self.products.values()
            if (
                not search
                or search in product.name.lower()
                or search in product.description.lower()
            )
            and (not product_filter.category or product.category.value == product_filter.category)
        ]

    async def find(self, product_filter, sort=NEWEST_FIRST, skip=0, limit=None) -> List[Product]:
        self._check("find")
        matches = sorted(
            self._matching(product_filter), key=lambda p: (p.created_at, p.id.hex), reverse=True
        )
        end = None if limit is None else skip + limit
        return matches[skip:end]

    async def count_documents(self, product_filter: ProductFilter) -> int:
        self._check("count_documents")
        return len(self._matching(product_filter))

    async def save(self, product: Product) -> Product:
        self._check("save")
        if product.id not in self.products:
            raise ProductNotFoundError()
        saved = replace(product, updated_at=timezone.now())
        self.products[saved.id] = saved
        return saved


class RecordingViewCache(ViewCachePort):
    """ViewCachePort keeping values in a dict and recording invalidations."""

    def __init__(self):
        self.values: Dict[str, Any] = {}
        self.invalidated: List[str] = []

    async def get(self, path: str) -> Optional[Any]:
        return self.values.get(path)

    async def set(self, path: str, value: Any, timeout: Optional[int] = None) -> None:
        self.values[path] = value

    async def invalidate(self, path: str) -> None:
        self.invalidated.append(path)
        self.values.pop(path, None)


def product_payload(**overrides) -> Dict[str, Any]:
    """Valid raw create input."""
    payload = {
        "name": "Wireless Mouse",
        "description": "Ergonomic 2.4GHz wireless mouse",
        "price": "24.99",
        "stock": "15",
        "category": "Electronics",
        "images": ["https://cdn.example.com/mouse-1.jpg"],
        "featured": "on",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def clear_cache():
    """Start every test with an empty Django cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def memory_repository():
    """Fixture for an in-memory ProductRepository."""
    return InMemoryProductRepository()


@pytest.fixture
def view_cache():
    """Fixture for a recording view cache."""
    return RecordingViewCache()


@pytest.fixture
def cache_service(view_cache):
    """Fixture for ProductCacheService over the recording view cache."""
    return ProductCacheService(cache=view_cache, listing_path="/products-listing", timeout=60)


@pytest.fixture
def sample_payload():
    """Fixture for valid raw create input."""
    return product_payload()


@pytest.fixture
def make_payload():
    """Fixture for building raw create input with overrides."""
    return product_payload


@pytest.fixture
def db_product(db, product_repository):
    """Fixture for a Product saved in database."""
    return async_to_sync(product_repository.create)(
        {
            "name": "Mechanical Keyboard",
            "description": "Tenkeyless keyboard with brown switches",
            "price": 89.5,
            "stock": 7,
            "category": "Electronics",
            "images": ["kb-front.png", "kb-side.png"],
            "featured": False,
        }
    )


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
