"""
Product view cache service.

Knows which cached views a product change affects and keeps them fresh.
"""
import logging
from typing import Any, Optional

from django.conf import settings

from core.infrastructure.cache import ViewCachePort
from core.infrastructure.cache_adapters import cache_adapter

logger = logging.getLogger(__name__)


class ProductCacheService:
    """Service for caching and invalidating product views."""

    def __init__(
        self,
        cache: Optional[ViewCachePort] = None,
        listing_path: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the service.

        Args:
            cache: View cache port (defaults to the Django cache adapter)
            listing_path: Path of the listing view (defaults to settings.PRODUCT_LISTING_PATH)
            timeout: Cache timeout in seconds (defaults to settings.PRODUCT_VIEW_CACHE_TIMEOUT)
        """
        self.cache = cache or cache_adapter
        self.listing_path = (listing_path or settings.PRODUCT_LISTING_PATH).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PRODUCT_VIEW_CACHE_TIMEOUT

    def product_path(self, product_id: Any) -> str:
        """Path of a single product's view."""
        return f"{self.listing_path}/{product_id}"

    async def get_listing(self) -> Optional[Any]:
        """Get the cached listing view."""
        return await self.cache.get(self.listing_path)

    async def set_listing(self, data: Any) -> None:
        """Cache the listing view."""
        await self.cache.set(self.listing_path, data, timeout=self.timeout)

    async def get_product(self, product_id: Any) -> Optional[Any]:
        """Get a product's cached view."""
        return await self.cache.get(self.product_path(product_id))

    async def set_product(self, product_id: Any, data: Any) -> None:
        """Cache a product's view."""
        await self.cache.set(self.product_path(product_id), data, timeout=self.timeout)

    async def invalidate_listing(self) -> None:
        """Invalidate the listing view."""
        await self.cache.invalidate(self.listing_path)
        logger.info("Invalidated product view: %s", self.listing_path)

    async def invalidate_product(self, product_id: Any) -> None:
        """
        Invalidate the listing view and a product's view.

        Args:
            product_id: Product ID
        """
        await self.invalidate_listing()
        path = self.product_path(product_id)
        await self.cache.invalidate(path)
        logger.info("Invalidated product view: %s", path)
