"""
CreateProductHandler.

Handles the create product command.
"""

import logging
from typing import Optional

from core.domain.exceptions import ProductValidationError
from core.domain.result import Result, Success
from products.application.commands.create_product import CreateProductCommand
from products.application.handlers.result_boundary import returns_result
from products.application.services.product_cache_service import ProductCacheService
from products.application.validators import validate_create
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:
    """Handler for CreateProductCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        cache_service: Optional[ProductCacheService] = None,
    ):
        """Initialize handler with repository and view cache."""
        self.product_repository = product_repository
        self.cache_service = cache_service or ProductCacheService()

    @returns_result("create_product", "Failed to create product. Please try again.")
    async def handle(self, command: CreateProductCommand) -> Result:
        """
        Handle create product command.

        Args:
            command: CreateProductCommand

        Returns:
            Success with the created product snapshot, or a Failure of kind
            VALIDATION, DUPLICATE_NAME or PERSISTENCE
        """
        await self.product_repository.ensure_connection()

        validation = validate_create(command.raw)
        if not validation.success:
            raise ProductValidationError(validation.errors)

        product = await self.product_repository.create(validation.data)

        await self.cache_service.invalidate_listing()

        logger.info(
            "Created product %s",
            product.id,
            extra={"operation": "create_product", "product_id": product.id},
        )
        return Success(product.to_dict())
