"""
CreateProductCommand.

Command to create a product from raw form input.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class CreateProductCommand:
    """Command to create a product."""

    raw: Mapping[str, Any] = field(default_factory=dict)  # Unvalidated form fields
