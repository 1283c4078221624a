"""
Cache adapter implementations.

Provides the Django cache implementation of ViewCachePort.
"""

import logging
from typing import Any, Optional

from asgiref.sync import sync_to_async
from django.core.cache import cache

from core.infrastructure.cache import ViewCachePort

logger = logging.getLogger(__name__)

VIEW_KEY_PREFIX = "view:"


def view_cache_key(path: str) -> str:
    """Build the cache key for a view path."""
    return f"{VIEW_KEY_PREFIX}{path}"


class DjangoViewCacheAdapter(ViewCachePort):
    """
    Django cache adapter implementing ViewCachePort.

    Uses Django's cache framework (can be Redis, Memcached, etc.).
    Cache failures are logged and never propagate to the caller.
    """

    async def get(self, path: str) -> Optional[Any]:
        """
        Get the cached view for a path.

        Args:
            path: View path

        Returns:
            Cached value or None if not found
        """
        key = view_cache_key(path)
        try:
            value = await sync_to_async(cache.get)(key)
            if value is not None:
                logger.debug("Cache hit: %s", key)
            else:
                logger.debug("Cache miss: %s", key)
            return value
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error getting from cache: %s", e, exc_info=True)
            return None

    async def set(self, path: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Cache the view for a path.

        Args:
            path: View path
            value: Value to cache
            timeout: Timeout in seconds (None for the backend default)
        """
        key = view_cache_key(path)
        try:
            if timeout is None:
                await sync_to_async(cache.set)(key, value)
            else:
                await sync_to_async(cache.set)(key, value, timeout=timeout)
            logger.debug("Cache set: %s (timeout=%s)", key, timeout)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error setting cache: %s", e, exc_info=True)

    async def invalidate(self, path: str) -> None:
        """
        Drop the cached view for a path.

        Args:
            path: View path
        """
        key = view_cache_key(path)
        try:
            await sync_to_async(cache.delete)(key)
            logger.debug("Cache invalidated: %s", key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error invalidating cache: %s", e, exc_info=True)


# Global cache instance
cache_adapter = DjangoViewCacheAdapter()
