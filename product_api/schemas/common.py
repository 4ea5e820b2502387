"""
==============================================================================
Common Schemas Module
==============================================================================

Shared result containers used by the service and API layers.

==============================================================================
"""

import math
from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a filtered list."""
    items: List[T]
    total: int = Field(ge=0)
    page: int
    limit: int = Field(ge=1)
    total_pages: int = Field(ge=0)

    @classmethod
    def create(cls, filtered: List[T], page: int, limit: int) -> "Page[T]":
        """Slice ``filtered`` to the requested page; out of range yields no items."""
        start = (page - 1) * limit
        items = filtered[start:start + limit] if page >= 1 else []
        return cls(
            items=items,
            total=len(filtered),
            page=page,
            limit=limit,
            total_pages=math.ceil(len(filtered) / limit),
        )

    @property
    def count(self) -> int:
        return len(self.items)


class CategoryStats(BaseModel):
    """Aggregates for a single category."""
    count: int = 0
    total_value: float = 0
    in_stock: int = 0
    out_of_stock: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "totalValue": self.total_value,
            "inStock": self.in_stock,
            "outOfStock": self.out_of_stock,
        }
