"""
App configuration for Product Catalog Service.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ProductCatalogServiceConfig(AppConfig):
    """App configuration for ProductCatalogService."""

    name = "ProductCatalogService"
    verbose_name = "Product Catalog Service"

    def ready(self):
        """Log the view paths the catalog invalidates after mutations."""
        from django.conf import settings

        logger.debug(
            "Product catalog ready (listing path: %s)",
            settings.PRODUCT_LISTING_PATH,
        )
