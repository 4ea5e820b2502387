"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog records.

==============================================================================
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product record held in the catalog.

    Serialized with camelCase keys (``inStock``) to match the HTTP API.

    Attributes:
        id: Opaque identifier, unique for the process lifetime
        name: Product display name
        description: Free text, empty when not given
        price: Non-negative price
        category: Lower-cased category name
        in_stock: Stock flag
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Product identifier")
    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field(default="", description="Product description")
    price: float = Field(..., ge=0, description="Product price")
    category: str = Field(..., min_length=1, description="Lower-cased category")
    in_stock: bool = Field(default=True, alias="inStock", description="Stock flag")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON responses."""
        return self.model_dump(by_alias=True)
