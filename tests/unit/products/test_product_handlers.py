"""
Unit tests for product handlers against an in-memory repository.
"""
import uuid

import pytest

from core.domain.exceptions import PersistenceError
from core.domain.result import ErrorKind
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.toggle_featured import ToggleFeaturedCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.handlers.create_product_handler import CreateProductHandler
from products.application.handlers.product_lifecycle_handlers import (
    DeleteProductHandler,
    ToggleFeaturedHandler,
    UpdateProductHandler,
)
from products.application.handlers.product_query_handlers import (
    GetProductHandler,
    ListProductsHandler,
)
from products.application.queries.get_product import GetProductQuery
from products.application.queries.list_products import ListProductsQuery

LISTING = "/products-listing"


async def _create(memory_repository, cache_service, payload):
    handler = CreateProductHandler(memory_repository, cache_service)
    result = await handler.handle(CreateProductCommand(raw=payload))
    assert result.success is True
    return result.data


@pytest.mark.asyncio
class TestCreateProductHandler:
    """Tests for CreateProductHandler."""

    async def test_create_success(
        self, memory_repository, cache_service, view_cache, sample_payload
    ):
        """Test a valid product is stored and the listing invalidated."""
        handler = CreateProductHandler(memory_repository, cache_service)

        result = await handler.handle(CreateProductCommand(raw=sample_payload))

        assert result.success is True
        assert result.data["name"] == "Wireless Mouse"
        assert result.data["price"] == 24.99
        assert result.data["featured"] is True
        assert uuid.UUID(result.data["id"])
        assert view_cache.invalidated == [LISTING]

    async def test_validation_failure_skips_store(
        self, memory_repository, cache_service, view_cache
    ):
        """Test invalid input never reaches the store."""
        handler = CreateProductHandler(memory_repository, cache_service)

        result = await handler.handle(CreateProductCommand(raw={"name": "ab"}))

        assert result.success is False
        assert result.kind == ErrorKind.VALIDATION
        assert result.error == "Validation failed"
        assert result.errors[0].message == "Product name must be at least 3 characters long"
        assert "create" not in memory_repository.calls
        assert view_cache.invalidated == []

    async def test_connection_checked_first(self, memory_repository, cache_service):
        """Test connectivity is ensured before anything else."""
        handler = CreateProductHandler(memory_repository, cache_service)

        await handler.handle(CreateProductCommand(raw={}))

        assert memory_repository.calls == ["ensure_connection"]

    async def test_duplicate_name(
        self, memory_repository, cache_service, view_cache, sample_payload
    ):
        """Test a second product with the same name is rejected."""
        await _create(memory_repository, cache_service, sample_payload)
        view_cache.invalidated.clear()
        handler = CreateProductHandler(memory_repository, cache_service)

        result = await handler.handle(CreateProductCommand(raw=sample_payload))

        assert result.success is False
        assert result.kind == ErrorKind.DUPLICATE_NAME
        assert result.error == "A product with this name already exists"
        assert result.errors == ()
        assert view_cache.invalidated == []

    async def test_store_failure(self, memory_repository, cache_service, sample_payload):
        """Test other store errors become persistence failures."""
        memory_repository.fail_with = PersistenceError("disk full")
        handler = CreateProductHandler(memory_repository, cache_service)

        result = await handler.handle(CreateProductCommand(raw=sample_payload))

        assert result.kind == ErrorKind.PERSISTENCE
        assert result.error == "disk full"

    async def test_store_failure_without_message(
        self, memory_repository, cache_service, sample_payload
    ):
        """Test the fallback message is used when the store gives none."""
        memory_repository.fail_with = RuntimeError()
        handler = CreateProductHandler(memory_repository, cache_service)

        result = await handler.handle(CreateProductCommand(raw=sample_payload))

        assert result.kind == ErrorKind.PERSISTENCE
        assert result.error == "Failed to create product. Please try again."


@pytest.mark.asyncio
class TestUpdateProductHandler:
    """Tests for UpdateProductHandler."""

    async def test_partial_update(
        self, memory_repository, cache_service, view_cache, sample_payload
    ):
        """Test only supplied fields change."""
        created = await _create(memory_repository, cache_service, sample_payload)
        view_cache.invalidated.clear()
        handler = UpdateProductHandler(memory_repository, cache_service)

        result = await handler.handle(
            UpdateProductCommand(product_id=created["id"], raw={"price": "19.99"})
        )

        assert result.success is True
        assert result.data["price"] == 19.99
        assert result.data["name"] == created["name"]
        assert result.data["stock"] == created["stock"]
        assert result.data["images"] == created["images"]
        assert view_cache.invalidated == [LISTING, f"{LISTING}/{created['id']}"]

    async def test_empty_images_keep_existing(
        self, memory_repository, cache_service, sample_payload
    ):
        """Test an empty images submission does not clear images."""
        created = await _create(memory_repository, cache_service, sample_payload)
        handler = UpdateProductHandler(memory_repository, cache_service)

        result = await handler.handle(
            UpdateProductCommand(product_id=created["id"], raw={"images": [""]})
        )

        assert result.data["images"] == created["images"]

    async def test_not_found(self, memory_repository, cache_service, view_cache):
        """Test updating a missing product."""
        handler = UpdateProductHandler(memory_repository, cache_service)

        result = await handler.handle(
            UpdateProductCommand(product_id=str(uuid.uuid4()), raw={"stock": "1"})
        )

        assert result.kind == ErrorKind.NOT_FOUND
        assert result.error == "Product not found"
        assert view_cache.invalidated == []

    async def test_malformed_id(self, memory_repository, cache_service):
        """Test an id that cannot exist is not found."""
        handler = UpdateProductHandler(memory_repository, cache_service)

        result = await handler.handle(UpdateProductCommand(product_id="not-an-id", raw={}))

        assert result.kind == ErrorKind.NOT_FOUND

    async def test_validation_failure(self, memory_repository, cache_service, sample_payload):
        """Test invalid supplied fields never reach the store."""
        created = await _create(memory_repository, cache_service, sample_payload)
        handler = UpdateProductHandler(memory_repository, cache_service)

        result = await handler.handle(
            UpdateProductCommand(product_id=created["id"], raw={"category": "Weapons"})
        )

        assert result.kind == ErrorKind.VALIDATION
        assert result.errors[0].message == "Weapons is not a valid category"
        assert "find_by_id_and_update" not in memory_repository.calls

    async def test_duplicate_name(self, memory_repository, cache_service, make_payload):
        """Test renaming onto an existing name."""
        await _create(memory_repository, cache_service, make_payload(name="First Product"))
        second = await _create(
            memory_repository, cache_service, make_payload(name="Second Product")
        )
        handler = UpdateProductHandler(memory_repository, cache_service)

        result = await handler.handle(
            UpdateProductCommand(product_id=second["id"], raw={"name": "First Product"})
        )

        assert result.kind == ErrorKind.DUPLICATE_NAME


@pytest.mark.asyncio
class TestDeleteProductHandler:
    """Tests for DeleteProductHandler."""

    async def test_delete_success(
        self, memory_repository, cache_service, view_cache, sample_payload
    ):
        """Test deleting an existing product."""
        created = await _create(memory_repository, cache_service, sample_payload)
        view_cache.invalidated.clear()
        handler = DeleteProductHandler(memory_repository, cache_service)

        result = await handler.handle(DeleteProductCommand(product_id=created["id"]))

        assert result.success is True
        assert result.data == {"message": "Product deleted successfully"}
        assert memory_repository.products == {}
        assert LISTING in view_cache.invalidated

    async def test_delete_missing(self, memory_repository, cache_service, view_cache):
        """Test deleting a missing product invalidates nothing."""
        handler = DeleteProductHandler(memory_repository, cache_service)

        result = await handler.handle(DeleteProductCommand(product_id=str(uuid.uuid4())))

        assert result.kind == ErrorKind.NOT_FOUND
        assert result.error == "Product not found"
        assert view_cache.invalidated == []


@pytest.mark.asyncio
class TestToggleFeaturedHandler:
    """Tests for ToggleFeaturedHandler."""

    async def test_toggle_twice(self, memory_repository, cache_service, view_cache, make_payload):
        """Test toggling twice restores the starting flag."""
        created = await _create(memory_repository, cache_service, make_payload(featured="false"))
        view_cache.invalidated.clear()
        handler = ToggleFeaturedHandler(memory_repository, cache_service)

        first = await handler.handle(ToggleFeaturedCommand(product_id=created["id"]))
        second = await handler.handle(ToggleFeaturedCommand(product_id=created["id"]))

        assert first.data["featured"] is True
        assert second.data["featured"] is False
        assert view_cache.invalidated.count(LISTING) == 2
        assert f"{LISTING}/{created['id']}" in view_cache.invalidated

    async def test_toggle_missing(self, memory_repository, cache_service, view_cache):
        """Test toggling a missing product."""
        handler = ToggleFeaturedHandler(memory_repository, cache_service)

        result = await handler.handle(ToggleFeaturedCommand(product_id=str(uuid.uuid4())))

        assert result.kind == ErrorKind.NOT_FOUND
        assert "save" not in memory_repository.calls
        assert view_cache.invalidated == []


@pytest.mark.asyncio
class TestQueryHandlers:
    """Tests for GetProductHandler and ListProductsHandler."""

    async def test_get_product(self, memory_repository, cache_service, sample_payload):
        """Test fetching a product by id."""
        created = await _create(memory_repository, cache_service, sample_payload)

        result = await GetProductHandler(memory_repository).handle(
            GetProductQuery(product_id=created["id"])
        )

        assert result.success is True
        assert result.data == created

    async def test_get_missing(self, memory_repository):
        """Test fetching a missing product."""
        result = await GetProductHandler(memory_repository).handle(
            GetProductQuery(product_id=str(uuid.uuid4()))
        )

        assert result.kind == ErrorKind.NOT_FOUND

    async def test_list_pagination(self, memory_repository, cache_service, make_payload):
        """Test the last partial page and the summary."""
        for i in range(25):
            await _create(memory_repository, cache_service, make_payload(name=f"Product {i:02d}"))

        result = await ListProductsHandler(memory_repository).handle(
            ListProductsQuery(page=3, limit=10)
        )

        assert result.success is True
        assert len(result.data["products"]) == 5
        assert result.data["pagination"] == {
            "page": 3,
            "limit": 10,
            "total": 25,
            "total_pages": 3,
        }

    async def test_list_search_and_category(self, memory_repository, cache_service, make_payload):
        """Test search and category narrow the listing."""
        await _create(memory_repository, cache_service, make_payload())
        await _create(
            memory_repository,
            cache_service,
            make_payload(name="Wireless Socks", description="Warm socks", category="Clothing"),
        )
        await _create(
            memory_repository,
            cache_service,
            make_payload(name="USB Hub", description="Four port hub"),
        )

        result = await ListProductsHandler(memory_repository).handle(
            ListProductsQuery(search="WIRELESS", category="Electronics")
        )

        assert [p["name"] for p in result.data["products"]] == ["Wireless Mouse"]
        assert result.data["pagination"]["total"] == 1

    async def test_list_invalid_params(self, memory_repository):
        """Test invalid paging is a validation failure."""
        result = await ListProductsHandler(memory_repository).handle(ListProductsQuery(page="0"))

        assert result.kind == ErrorKind.VALIDATION
        assert "find" not in memory_repository.calls
