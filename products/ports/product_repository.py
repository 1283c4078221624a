"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from products.domain.product import Product
from products.domain.product_filter import NEWEST_FIRST, ProductFilter


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Ids that cannot identify a product behave like missing products.
    """

    @abstractmethod
    async def ensure_connection(self) -> None:
        """Make sure the store is reachable. Idempotent."""
        pass

    @abstractmethod
    async def create(self, payload: Dict[str, Any]) -> Product:
        """
        Create a product from a validated payload.

        Args:
            payload: Fully populated product fields

        Returns:
            Created product entity

        Raises:
            DuplicateProductNameError: If the name is already taken
        """
        pass

    @abstractmethod
    async def find_by_id(self, product_id: Any) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product ID

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_id_and_update(
        self, product_id: Any, payload: Dict[str, Any]
    ) -> Optional[Product]:
        """
        Atomically merge a partial payload into a product and re-validate it.

        Args:
            product_id: Product ID
            payload: Fields to change

        Returns:
            Updated product entity or None if not found

        Raises:
            DuplicateProductNameError: If the new name is already taken
        """
        pass

    @abstractmethod
    async def find_by_id_and_delete(self, product_id: Any) -> Optional[Product]:
        """
        Delete a product by ID.

        Args:
            product_id: Product ID

        Returns:
            Deleted product entity or None if not found
        """
        pass

    @abstractmethod
    async def find(
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
        pass

    @abstractmethod
    async def count_documents(self, product_filter: ProductFilter) -> int:
        """
        Count products matching a filter.

        Args:
            product_filter: Listing filter

        Returns:
            Number of matching products
        """
        pass

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """
        Persist changes to an existing product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity

        Raises:
            ProductNotFoundError: If the product no longer exists
        """
        pass
