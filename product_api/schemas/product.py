"""
==============================================================================
Product Schemas Module
==============================================================================

Request schemas for product operations.

Includes:
- ProductPayload: body of create and update requests
- ProductListQuery: normalized listing filters and pagination

==============================================================================
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator

from product_api.core.exceptions import ValidationError


# Messages reported per field, in the order rules are checked.
FIELD_MESSAGES: Dict[str, str] = {
    "name": "Product name is required and must be a non-empty string",
    "price": "Price is required and must be a non-negative number",
    "category": "Category is required and must be a non-empty string",
}


def truthy(value: Any) -> bool:
    """
    Coerce a decoded JSON value to a boolean.

    Follows JavaScript truthiness, which API clients expect: ``null``,
    ``false``, ``0`` and ``""`` are false; every array and object,
    even an empty one, is true.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True


# =============================================================================
# CREATE / UPDATE SCHEMA
# =============================================================================

class ProductPayload(BaseModel):
    """
    Body of POST and PUT product requests.

    ``name``, ``price`` and ``category`` are required and type-checked
    strictly (``"25"`` is not a price, ``true`` is not a number).
    ``description`` and ``inStock`` are accepted as-is; whether they were
    sent at all is tracked so updates can keep prior values.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    price: Union[StrictInt, StrictFloat]
    category: StrictStr
    description: Any = None
    in_stock: Any = Field(default=None, alias="inStock")

    @field_validator("name", "category")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: Union[int, float]) -> Union[int, float]:
        try:
            as_float = float(v)
        except OverflowError:
            raise ValueError("must be a finite number")
        if not math.isfinite(as_float):
            raise ValueError("must be a finite number")
        if v < 0:
            raise ValueError("must be a non-negative number")
        return v

    @classmethod
    def from_body(cls, body: Any) -> "ProductPayload":
        """
        Validate a decoded JSON body.

        Args:
            body: Decoded request body

        Returns:
            Validated payload

        Raises:
            ValidationError: With the first violated rule as message and
                every violated field listed in ``details["fields"]``
        """
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")

        try:
            return cls.model_validate(body)
        except pydantic.ValidationError as exc:
            fields: List[str] = []
            for err in exc.errors():
                loc = err.get("loc") or ("body",)
                field = str(loc[0])
                if field not in fields:
                    fields.append(field)

            ordered = [f for f in FIELD_MESSAGES if f in fields]
            ordered += [f for f in fields if f not in FIELD_MESSAGES]

            violations = [
                {"field": f, "message": FIELD_MESSAGES.get(f, "Invalid value")}
                for f in ordered
            ]
            raise ValidationError(
                violations[0]["message"],
                {"fields": violations}
            ) from exc

    # =========================================================================
    # NORMALIZED VALUES
    # =========================================================================

    @property
    def has_description(self) -> bool:
        return "description" in self.model_fields_set

    @property
    def has_in_stock(self) -> bool:
        return "in_stock" in self.model_fields_set

    @property
    def normalized_description(self) -> str:
        """Trimmed description, or empty string when not a non-empty string."""
        if isinstance(self.description, str):
            return self.description.strip()
        return ""

    @property
    def normalized_category(self) -> str:
        return self.category.strip().lower()

    @property
    def in_stock_flag(self) -> bool:
        """Stock flag for a new product: true unless sent and falsy."""
        if not self.has_in_stock:
            return True
        return truthy(self.in_stock)


# =============================================================================
# LISTING QUERY
# =============================================================================

class ProductListQuery(BaseModel):
    """Normalized listing filters; ``None`` disables a filter."""

    category: Optional[str] = None
    in_stock: Optional[bool] = None
    search: Optional[str] = None
    page: int = Field(default=1, description="Pages below 1 select nothing")
    limit: int = Field(default=10, ge=1)
