"""
Unit tests for ProductCacheService.
"""
import pytest
from django.test import override_settings

from products.application.services.product_cache_service import ProductCacheService


@pytest.mark.asyncio
class TestProductCacheService:
    """Tests for ProductCacheService."""

    async def test_invalidate_listing(self, cache_service, view_cache):
        """Test only the listing view is invalidated."""
        await cache_service.invalidate_listing()

        assert view_cache.invalidated == ["/products-listing"]

    async def test_invalidate_product(self, cache_service, view_cache):
        """Test the listing and the product view are invalidated."""
        await cache_service.invalidate_product("abc")

        assert view_cache.invalidated == ["/products-listing", "/products-listing/abc"]

    async def test_cached_views(self, cache_service, view_cache):
        """Test views are stored under their paths."""
        await cache_service.set_listing({"success": True})
        await cache_service.set_product("abc", {"success": True, "data": {"id": "abc"}})

        assert await cache_service.get_listing() == {"success": True}
        assert await cache_service.get_product("abc") == {"success": True, "data": {"id": "abc"}}
        assert set(view_cache.values) == {"/products-listing", "/products-listing/abc"}

    async def test_listing_path_from_settings(self, view_cache):
        """Test the listing path is configurable."""
        with override_settings(PRODUCT_LISTING_PATH="/shop/products/"):
            service = ProductCacheService(cache=view_cache)

        assert service.listing_path == "/shop/products"
        assert service.product_path("42") == "/shop/products/42"
