"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for the product endpoints.

==============================================================================
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from product_index.catalog.models import ProductResponse


class ProductCreate(BaseModel):
    """Product creation request. Empty values are accepted as-is."""
    name: str
    brand: str
    category: str


class ProductDetailResponse(BaseModel):
    """Single product response."""
    success: bool = Field(default=True)
    product: ProductResponse


class ProductListResponse(BaseModel):
    """Product listing, optionally filtered by category."""
    success: bool = Field(default=True)
    category: Optional[str] = None
    total: int = Field(ge=0)
    products: List[ProductResponse]


class SearchResponse(BaseModel):
    """Exact-match search results."""
    success: bool = Field(default=True)
    term: str
    field: str
    total: int = Field(ge=0)
    products: List[ProductResponse]


class CategoryListResponse(BaseModel):
    """Distinct categories in first-seen order."""
    success: bool = Field(default=True)
    categories: List[str]


class CatalogStats(BaseModel):
    """Catalog statistics."""
    total_products: int = Field(ge=0)
    next_id: int = Field(ge=1)
    categories: Dict[str, int]
    index_keys: Dict[str, int]


class StatsResponse(BaseModel):
    """Catalog statistics response."""
    success: bool = Field(default=True)
    stats: CatalogStats
