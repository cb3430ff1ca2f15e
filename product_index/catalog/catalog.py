"""
==============================================================================
Product Catalog Module
==============================================================================

Ordered in-memory store of product records.

Features:
---------
- Sequential identifiers starting at 1, never reused
- Insertion-ordered iteration
- O(1) identifier resolution
- Case-insensitive category filtering

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class Catalog:
    """
    Owner of all product records and the identifier counter.

    Records are kept in insertion order for listing, with a parallel
    id map for lookups. There is no update or delete path, so
    ``len(catalog) == catalog.next_id - 1`` always holds.

    Example:
        >>> catalog = Catalog()
        >>> catalog.append("Phone X", "Acme", "Celulares")
        1
        >>> catalog.get(1).brand
        'Acme'
    """

    def __init__(self) -> None:
        self._products: List[Product] = []
        self._by_id: Dict[int, Product] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._products)

    @property
    def next_id(self) -> int:
        """Identifier the next appended product will receive."""
        return self._next_id

    # =========================================================================
    # MUTATION
    # =========================================================================

    def append(self, name: str, brand: str, category: str) -> int:
        """
        Store a new product under the next identifier.

        Args:
            name: Product name
            brand: Brand name
            category: Category name

        Returns:
            The assigned identifier
        """
        product = Product(id=self._next_id, name=name, brand=brand, category=category)
        self._next_id += 1

        self._products.append(product)
        self._by_id[product.id] = product

        return product.id

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get(self, product_id: int) -> Optional[Product]:
        """Find product by identifier."""
        return self._by_id.get(product_id)

    def all(self) -> List[Product]:
        """Get all products in insertion order."""
        return self._products.copy()

    def filter_by_category(self, term: str) -> List[Product]:
        """
        Get products whose category matches ``term`` case-insensitively.

        Args:
            term: Category to match

        Returns:
            Matching products in insertion order
        """
        wanted = term.lower()
        return [p for p in self._products if p.category.lower() == wanted]

    def categories(self) -> List[str]:
        """Distinct categories in first-seen order, keeping the first spelling."""
        seen = {}
        for product in self._products:
            seen.setdefault(product.category.lower(), product.category)
        return list(seen.values())
