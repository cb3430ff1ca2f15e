"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for adding, listing and searching products.

==============================================================================
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from product_index.catalog.engine import SearchEngine
from product_index.catalog.models import Product, ProductResponse, SearchField
from product_index.core.dependencies import get_engine
from product_index.schemas.product import (
    CategoryListResponse,
    ProductCreate,
    ProductDetailResponse,
    ProductListResponse,
    SearchResponse,
    StatsResponse,
)


router = APIRouter(prefix="/products", tags=["Products"])


def _to_responses(products: List[Product]) -> List[ProductResponse]:
    return [ProductResponse.from_product(p) for p in products]


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, engine: SearchEngine):
        self._engine = engine

    def list_products(self, category: Optional[str]) -> ProductListResponse:
        """List all products, or those in one category."""
        if category is None:
            products = self._engine.list_all()
        else:
            products = self._engine.list_by_category(category)

        return ProductListResponse(
            category=category,
            total=len(products),
            products=_to_responses(products),
        )

    def create(self, data: ProductCreate) -> ProductDetailResponse:
        """Insert a product."""
        product_id = self._engine.insert(data.name, data.brand, data.category)
        return ProductDetailResponse(
            product=ProductResponse.from_product(self._engine.get(product_id))
        )

    def search(self, term: str, field: str) -> SearchResponse:
        """Exact-match search on one field."""
        products = self._engine.query(term, field)
        return SearchResponse(
            term=term,
            field=SearchField.parse(field).value,
            total=len(products),
            products=_to_responses(products),
        )

    def get_categories(self) -> CategoryListResponse:
        """Get all categories."""
        return CategoryListResponse(categories=self._engine.categories())

    def get_by_id(self, product_id: int) -> ProductDetailResponse:
        """Get product by identifier."""
        return ProductDetailResponse(
            product=ProductResponse.from_product(self._engine.get(product_id))
        )

    def get_stats(self) -> StatsResponse:
        """Get catalog statistics."""
        return StatsResponse(stats=self._engine.stats())


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: Optional[str] = Query(None, description="Case-insensitive category filter"),
    engine: SearchEngine = Depends(get_engine)
):
    """List products in insertion order, optionally filtered by category."""
    return ProductController(engine).list_products(category)


@router.post("", response_model=ProductDetailResponse)
async def create_product(
    data: ProductCreate,
    engine: SearchEngine = Depends(get_engine)
):
    """Add a product to the catalog and its indexes."""
    return ProductController(engine).create(data)


@router.get("/search", response_model=SearchResponse)
async def search_products(
    term: str = Query(..., description="Exact value to match, case-insensitive"),
    field: str = Query("name", description="One of: name, brand, category"),
    engine: SearchEngine = Depends(get_engine)
):
    """Search products by exact name, brand or category."""
    return ProductController(engine).search(term, field)


@router.get("/categories", response_model=CategoryListResponse)
async def get_categories(engine: SearchEngine = Depends(get_engine)):
    """Get all distinct categories."""
    return ProductController(engine).get_categories()


@router.get("/stats", response_model=StatsResponse)
async def get_catalog_stats(engine: SearchEngine = Depends(get_engine)):
    """Get catalog statistics."""
    return ProductController(engine).get_stats()


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(product_id: int, engine: SearchEngine = Depends(get_engine)):
    """Get product by identifier."""
    return ProductController(engine).get_by_id(product_id)
