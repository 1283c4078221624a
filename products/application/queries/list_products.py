"""
ListProductsQuery.

Query for one page of the product listing, and the pieces that turn its
parameters into a store query.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from products.domain.product_filter import ProductFilter

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass
class ListProductsQuery:
    """
    Query for a page of products.

    Values may be raw query-string text; they are validated when the
    query is handled.
    """

    search: Optional[str] = ""
    category: Optional[str] = ""
    page: Any = DEFAULT_PAGE
    limit: Any = DEFAULT_LIMIT


def build_product_filter(search: Optional[str], category: Optional[str]) -> ProductFilter:
    """
    Build the listing filter.

    Args:
        search: Text to find in name or description (case-insensitive)
        category: Exact category

    Returns:
        ProductFilter; blank values add no constraint
    """
    return ProductFilter(
        search=(search or "").strip(),
        category=(category or "").strip(),
    )


def page_window(page: int, limit: int) -> Tuple[int, int]:
    """
    Translate a 1-based page number into skip/limit.

    Args:
        page: Page number, starting at 1
        limit: Page size

    Returns:
        (skip, limit)
    """
    return (page - 1) * limit, limit
