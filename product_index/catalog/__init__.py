"""
==============================================================================
Catalog Package - Product Storage and Search
==============================================================================

In-memory product catalog with exact, case-insensitive lookup by
name, brand and category.

Classes:
--------
- Product: Immutable pydantic model for products
- SearchField: Indexed field selector
- Catalog: Ordered record store and id counter
- IndexSet: Per-field term -> postings mappings
- SearchEngine: Insert/query facade over Catalog and IndexSet

==============================================================================
"""

from .models import Product, ProductResponse, SearchField
from .catalog import Catalog
from .index import IndexSet
from .engine import SearchEngine, get_engine, init_engine

__all__ = [
    "Product",
    "ProductResponse",
    "SearchField",
    "Catalog",
    "IndexSet",
    "SearchEngine",
    "get_engine",
    "init_engine",
]
