"""
Product query handlers.

Handlers for single-product lookup and the paginated listing.
"""
import asyncio
from dataclasses import asdict

from core.domain.exceptions import ProductNotFoundError, ProductValidationError
from core.domain.result import Result, Success
from products.application.dto.product_dto import PaginationDTO, ProductPageDTO
from products.application.handlers.result_boundary import returns_result
from products.application.queries.get_product import GetProductQuery
from products.application.queries.list_products import (
    ListProductsQuery,
    build_product_filter,
    page_window,
)
from products.application.validators import validate_list_params
from products.domain.product_filter import NEWEST_FIRST
from products.ports.product_repository import ProductRepository


class GetProductHandler:
    """Handler for GetProductQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    @returns_result("get_product", "Failed to fetch product. Please try again.")
    async def handle(self, query: GetProductQuery) -> Result:
        """
        Handle get product query.

        Args:
            query: GetProductQuery

        Returns:
            Success with the product snapshot

        Raises:
            ProductNotFoundError: If product not found
        """
        await self.product_repository.ensure_connection()

        product = await self.product_repository.find_by_id(query.product_id)
        if not product:
            raise ProductNotFoundError()

        return Success(product.to_dict())


class ListProductsHandler:
    """Handler for ListProductsQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    @returns_result("list_products", "Failed to fetch products. Please try again.")
    async def handle(self, query: ListProductsQuery) -> Result:
        """
        Handle list products query.

        The page and the total count are read with the same filter as two
        independent store calls.

        Args:
            query: ListProductsQuery

        Returns:
            Success with ``{"products": [...], "pagination": {...}}``
            sorted newest first

        Raises:
            ProductValidationError: If page or limit is invalid
        """
        await self.product_repository.ensure_connection()

        validation = validate_list_params(asdict(query))
        if not validation.success:
            raise ProductValidationError(validation.errors)
        params = validation.data

        product_filter = build_product_filter(params["search"], params["category"])
        skip, limit = page_window(params["page"], params["limit"])

        products, total = await asyncio.gather(
            self.product_repository.find(product_filter, NEWEST_FIRST, skip, limit),
            self.product_repository.count_documents(product_filter),
        )

        page = ProductPageDTO(
            products=[product.to_dict() for product in products],
            pagination=PaginationDTO.build(params["page"], limit, total),
        )
        return Success(page.to_dict())
