"""
Product DTOs for operation results.
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, List

DELETED_MESSAGE = "Product deleted successfully"


@dataclass
class PaginationDTO:
    """DTO for a listing's pagination summary."""

    page: int
    limit: int
    total: int  # Products matching the filter, not the page size
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationDTO":
        """Summarize a page of a listing with ``total`` matches."""
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "total_pages": self.total_pages,
        }


@dataclass
class ProductPageDTO:
    """DTO for one page of a product listing."""

    products: List[Dict[str, Any]]
    pagination: PaginationDTO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "products": self.products,
            "pagination": self.pagination.to_dict(),
        }


@dataclass
class MessageDTO:
    """DTO for operations that only report a message."""

    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"message": self.message}
