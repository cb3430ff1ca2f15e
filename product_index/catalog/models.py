"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog records and the searchable field selector.

==============================================================================
"""

from __future__ import annotations

import enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from product_index.core import exceptions


class SearchField(str, enum.Enum):
    """Indexed product field a query can target."""

    NAME = "name"
    BRAND = "brand"
    CATEGORY = "category"

    @classmethod
    def parse(cls, value: Union["SearchField", str]) -> "SearchField":
        """
        Resolve a field selector.

        Accepts an enum member, a field name in any case, or a numeric
        menu selector: 1 (name), 2 (brand), 3 (category). Numeric
        selectors are read as integers, so "01" and "+2" also match.

        Raises:
            AppException: INVALID_FIELD_SELECTOR for anything else
        """
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower()
        digits = normalized[1:] if normalized.startswith("+") else normalized
        if digits.isdecimal():
            selector = _MENU_SELECTORS.get(int(digits))
            if selector is None:
                raise exceptions.invalid_field_selector(value)
            return selector

        try:
            return cls(normalized)
        except ValueError:
            raise exceptions.invalid_field_selector(value) from None


_MENU_SELECTORS = {
    1: SearchField.NAME,
    2: SearchField.BRAND,
    3: SearchField.CATEGORY,
}


class Product(BaseModel):
    """
    Immutable catalog record.

    Attributes:
        id: Sequential identifier, assigned from 1
        name: Product display name
        brand: Brand name
        category: Category name
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Sequential product identifier")
    name: str = Field(..., description="Product name")
    brand: str = Field(..., description="Brand name")
    category: str = Field(..., description="Category name")


class ProductResponse(BaseModel):
    """Product response schema for API endpoints."""

    id: int
    name: str
    brand: str
    category: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from Product model."""
        return cls(
            id=product.id,
            name=product.name,
            brand=product.brand,
            category=product.category,
        )
