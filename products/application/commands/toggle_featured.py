"""
ToggleFeaturedCommand.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class ToggleFeaturedCommand:
    """Command to flip a product's featured flag."""

    product_id: Any
