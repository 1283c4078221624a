"""
Product API views.

Thin adapters: each view builds a command or query from the request,
runs the matching handler and renders its result envelope. Failures map
to HTTP status codes by error kind.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import STATUS_BY_KIND
from api.v1.products.serializers import (
    FailureResponseSerializer,
    MessageResponseSerializer,
    ProductPageResponseSerializer,
    ProductRequestSerializer,
    ProductResponseSerializer,
)
from core.domain.result import Result
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
from products.application.services.product_cache_service import ProductCacheService
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()

LIST_PARAMS = ("search", "category", "page", "limit")


def _render(result: Result, success_status: int = status.HTTP_200_OK) -> Response:
    """Render a handler result as a response."""
    if result.success:
        return Response(result.to_dict(), status=success_status)
    return Response(result.to_dict(), status=STATUS_BY_KIND[result.kind])


class ProductListCreateView(APIView):
    """View for listing and creating products."""

    @extend_schema(
        operation_id="list_products",
        summary="List Products",
        description=(
            "List products newest first. `search` matches name or description "
            "(case-insensitive), `category` filters by exact category."
        ),
        tags=["Products"],
        parameters=[
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="category", type=str, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="page", type=int, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="limit", type=int, location=OpenApiParameter.QUERY),
        ],
        responses={
            200: ProductPageResponseSerializer,
            400: FailureResponseSerializer,
            500: FailureResponseSerializer,
        },
    )
    def get(self, request: Request) -> Response:
        """List products."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for list products."""
        cache_service = ProductCacheService()
        # Only the unfiltered first page is the cached listing view
        cacheable = not request.query_params
        if cacheable:
            cached = await cache_service.get_listing()
            if cached is not None:
                return Response(cached, status=status.HTTP_200_OK)

        params = {
            key: request.query_params[key] for key in LIST_PARAMS if key in request.query_params
        }
        result = await ListProductsHandler(product_repository=_product_repo).handle(
            ListProductsQuery(**params)
        )
        if cacheable and result.success:
            await cache_service.set_listing(result.to_dict())
        return _render(result)

    @extend_schema(
        operation_id="create_product",
        summary="Create Product",
        description="Create a product from JSON, form-encoded or multipart input.",
        tags=["Products"],
        request=ProductRequestSerializer,
        responses={
            201: ProductResponseSerializer,
            400: FailureResponseSerializer,
            409: FailureResponseSerializer,
            500: FailureResponseSerializer,
        },
    )
    def post(self, request: Request) -> Response:
        """Create a product."""
        handler = CreateProductHandler(
            product_repository=_product_repo, cache_service=ProductCacheService()
        )
        result = async_to_sync(handler.handle)(CreateProductCommand(raw=request.data))
        return _render(result, success_status=status.HTTP_201_CREATED)


class ProductDetailView(APIView):
    """View for reading, updating and deleting a product."""

    @extend_schema(
        operation_id="get_product",
        summary="Get Product",
        tags=["Products"],
        responses={
            200: ProductResponseSerializer,
            404: FailureResponseSerializer,
            500: FailureResponseSerializer,
        },
    )
    def get(self, request: Request, product_id: str) -> Response:
        """Get a product."""
        return async_to_sync(self._handle_get)(product_id)

    async def _handle_get(self, product_id: str) -> Response:
        """Async handler for get product, served from the view cache when present."""
        cache_service = ProductCacheService()
        cached = await cache_service.get_product(product_id)
        if cached is not None:
            return Response(cached, status=status.HTTP_200_OK)

        result = await GetProductHandler(product_repository=_product_repo).handle(
            GetProductQuery(product_id=product_id)
        )
        if result.success:
            await cache_service.set_product(result.data["id"], result.to_dict())
        return _render(result)

    @extend_schema(
        operation_id="update_product",
        summary="Update Product",
        description="Update only the supplied fields of a product.",
        tags=["Products"],
        request=ProductRequestSerializer(partial=True),
        responses={
            200: ProductResponseSerializer,
            400: FailureResponseSerializer,
            404: FailureResponseSerializer,
            409: FailureResponseSerializer,
            500: FailureResponseSerializer,
        },
    )
    def patch(self, request: Request, product_id: str) -> Response:
        """Update a product."""
        handler = UpdateProductHandler(
            product_repository=_product_repo, cache_service=ProductCacheService()
        )
        result = async_to_sync(handler.handle)(
            UpdateProductCommand(product_id=product_id, raw=request.data)
        )
        return _render(result)

    @extend_schema(
        operation_id="delete_product",
        summary="Delete Product",
        tags=["Products"],
        responses={
            200: MessageResponseSerializer,
            404: FailureResponseSerializer,
            500: FailureResponseSerializer,
        },
    )
    def delete(self, request: Request, product_id: str) -> Response:
        """Delete a product."""
        handler = DeleteProductHandler(
            product_repository=_product_repo, cache_service=ProductCacheService()
        )
        result = async_to_sync(handler.handle)(DeleteProductCommand(product_id=product_id))
        return _render(result)


class ProductFeaturedToggleView(APIView):
    """View for toggling a product's featured flag."""

    @extend_schema(
        operation_id="toggle_featured",
        summary="Toggle Featured",
        description="Flip the featured flag of a product.",
        tags=["Products"],
        request=None,
        responses={
            200: ProductResponseSerializer,
            404: FailureResponseSerializer,
            500: FailureResponseSerializer,
        },
    )
    def post(self, request: Request, product_id: str) -> Response:
        """Toggle a product's featured flag."""
        handler = ToggleFeaturedHandler(
            product_repository=_product_repo, cache_service=ProductCacheService()
        )
        result = async_to_sync(handler.handle)(ToggleFeaturedCommand(product_id=product_id))
        return _render(result)
