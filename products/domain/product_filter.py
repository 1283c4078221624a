"""
Product listing filter.

Describes which products a listing matches, independent of the store
that evaluates it.
"""
from dataclasses import dataclass
from typing import Tuple

NEWEST_FIRST: Tuple[str, ...] = ("-created_at", "-id")


@dataclass(frozen=True)
class ProductFilter:
    """
    Listing filter.

    ``search`` matches name OR description as a case-insensitive
    substring; ``category`` is an exact match. Blank values match
    everything.
    """

    search: str = ""
    category: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.search and not self.category
