"""
GetProductQuery.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class GetProductQuery:
    """Query for a single product by ID."""

    product_id: Any
