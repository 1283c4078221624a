"""
DeleteProductCommand.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class DeleteProductCommand:
    """Command to hard-delete a product."""

    product_id: Any
