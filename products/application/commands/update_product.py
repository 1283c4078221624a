"""
UpdateProductCommand.

Command to change some fields of a product.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class UpdateProductCommand:
    """
    Command to update a product.

    ``raw`` holds only the fields to change; absent fields are left
    untouched.
    """

    product_id: Any
    raw: Mapping[str, Any] = field(default_factory=dict)
