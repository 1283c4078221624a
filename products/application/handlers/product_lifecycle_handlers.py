"""
Product lifecycle handlers.

Handlers for update, delete and toggle-featured commands.
"""
import logging
from typing import Optional

from core.domain.exceptions import ProductNotFoundError, ProductValidationError
from core.domain.result import Result, Success
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.toggle_featured import ToggleFeaturedCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.dto.product_dto import DELETED_MESSAGE, MessageDTO
from products.application.handlers.result_boundary import returns_result
from products.application.services.product_cache_service import ProductCacheService
from products.application.validators import validate_update
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:
    """Handler for UpdateProductCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        cache_service: Optional[ProductCacheService] = None,
    ):
        """Initialize handler with repository and view cache."""
        self.product_repository = product_repository
        self.cache_service = cache_service or ProductCacheService()

    @returns_result("update_product", "Failed to update product. Please try again.")
    async def handle(self, command: UpdateProductCommand) -> Result:
        """
        Handle update product command.

        Only the supplied fields are validated and merged; the store
        re-validates the merged product.

        Args:
            command: UpdateProductCommand

        Returns:
            Success with the updated product snapshot

        Raises:
            ProductValidationError: If supplied fields are invalid
            ProductNotFoundError: If product not found
        """
        await self.product_repository.ensure_connection()

        validation = validate_update(command.raw)
        if not validation.success:
            raise ProductValidationError(validation.errors)

        product = await self.product_repository.find_by_id_and_update(
            command.product_id, validation.data
        )
        if not product:
            raise ProductNotFoundError()

        await self.cache_service.invalidate_product(product.id)

        logger.info(
            "Updated product %s (%s)",
            product.id,
            ", ".join(sorted(validation.data)) or "no fields",
            extra={"operation": "update_product", "product_id": product.id},
        )
        return Success(product.to_dict())


class DeleteProductHandler:
    """Handler for DeleteProductCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        cache_service: Optional[ProductCacheService] = None,
    ):
        """Initialize handler with repository and view cache."""
        self.product_repository = product_repository
        self.cache_service = cache_service or ProductCacheService()

    @returns_result("delete_product", "Failed to delete product. Please try again.")
    async def handle(self, command: DeleteProductCommand) -> Result:
        """
        Handle delete product command.

        Args:
            command: DeleteProductCommand

        Returns:
            Success with a confirmation message

        Raises:
            ProductNotFoundError: If product not found
        """
        await self.product_repository.ensure_connection()

        product = await self.product_repository.find_by_id_and_delete(command.product_id)
        if not product:
            raise ProductNotFoundError()

        await self.cache_service.invalidate_product(product.id)

        logger.info(
            "Deleted product %s",
            product.id,
            extra={"operation": "delete_product", "product_id": product.id},
        )
        return Success(MessageDTO(message=DELETED_MESSAGE).to_dict())


class ToggleFeaturedHandler:
    """Handler for ToggleFeaturedCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        cache_service: Optional[ProductCacheService] = None,
    ):
        """Initialize handler with repository and view cache."""
        self.product_repository = product_repository
        self.cache_service = cache_service or ProductCacheService()

    @returns_result("toggle_featured", "Failed to update product. Please try again.")
    async def handle(self, command: ToggleFeaturedCommand) -> Result:
        """
        Handle toggle featured command.

        Args:
            command: ToggleFeaturedCommand

        Returns:
            Success with the saved product snapshot

        Raises:
            ProductNotFoundError: If product not found
        """
        await self.product_repository.ensure_connection()

        product = await self.product_repository.find_by_id(command.product_id)
        if not product:
            raise ProductNotFoundError()

        saved = await self.product_repository.save(product.toggle_featured())

        await self.cache_service.invalidate_product(saved.id)

        logger.info(
            "Product %s featured=%s",
            saved.id,
            saved.featured,
            extra={"operation": "toggle_featured", "product_id": saved.id},
        )
        return Success(saved.to_dict())
