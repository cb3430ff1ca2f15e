"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

==============================================================================
"""

from .product import (
    ProductCreate,
    ProductDetailResponse,
    ProductListResponse,
    SearchResponse,
    CategoryListResponse,
    CatalogStats,
    StatsResponse,
)

__all__ = [
    "ProductCreate",
    "ProductDetailResponse",
    "ProductListResponse",
    "SearchResponse",
    "CategoryListResponse",
    "CatalogStats",
    "StatsResponse",
]
