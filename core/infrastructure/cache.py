"""
View cache abstraction (port).

The catalog caches rendered views by path and invalidates those paths
after every successful mutation. Implementations can use Redis,
Memcached, or an in-memory cache.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional


class ViewCachePort(ABC):
    """
    Abstract view cache port.

    ``invalidate`` is fire-and-forget: implementations must not raise.
    """

    @abstractmethod
    async def get(self, path: str) -> Optional[Any]:
        """
        Get the cached view for a path.

        Args:
            path: View path (e.g. /products-listing)

        Returns:
            Cached value or None if not found
        """
        pass

    @abstractmethod
    async def set(self, path: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Cache the view for a path.

        Args:
            path: View path
            value: Value to cache
            timeout: Timeout in seconds (None for the backend default)
        """
        pass

    @abstractmethod
    async def invalidate(self, path: str) -> None:
        """
        Drop the cached view for a path.

        Args:
            path: View path
        """
        pass
