"""
==============================================================================
Search Engine Module
==============================================================================

Insertion and exact-match search over the product catalog.

The engine owns one Catalog and one IndexSet and is the only thing
that mutates them. Every insert appends the product to the catalog and
its id to the name, brand and category postings in the same call, so
both structures always agree.

Query Resolution:
----------------
1. Lowercase the term and fetch postings for the requested field
2. Sort identifiers ascending and drop duplicates
3. Resolve each identifier against the catalog

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Union

from product_index.core import exceptions
from product_index.core.exceptions import AppException

from .catalog import Catalog
from .index import IndexSet
from .models import Product, SearchField


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_SEED_CATEGORIES = ("Eletrônicos", "Celulares", "Periféricos")
DEFAULT_SEED_COUNT = 5


class SearchEngine:
    """
    Product store with case-insensitive exact lookup by name, brand or category.

    Attributes:
        strict_consistency: Raise INDEX_INCONSISTENT when a postings id
            does not resolve, instead of skipping it

    Example:
        >>> engine = SearchEngine()
        >>> engine.insert("Phone X", "Acme", "Celulares")
        1
        >>> [p.id for p in engine.query("acme", SearchField.BRAND)]
        [1]
    """

    def __init__(self, strict_consistency: bool = True) -> None:
        self.strict_consistency = strict_consistency
        self._catalog = Catalog()
        self._index = IndexSet()

    def __len__(self) -> int:
        return len(self._catalog)

    # =========================================================================
    # MUTATION
    # =========================================================================

    def insert(self, name: str, brand: str, category: str) -> int:
        """
        Add a product and index it on all three fields.

        Empty strings are stored and indexed as-is.

        Returns:
            The assigned identifier
        """
        product_id = self._catalog.append(name, brand, category)

        self._index.add_entry(SearchField.NAME, name, product_id)
        self._index.add_entry(SearchField.BRAND, brand, product_id)
        self._index.add_entry(SearchField.CATEGORY, category, product_id)

        logger.debug(f"Inserted product {product_id}: {name!r} / {brand!r} / {category!r}")
        return product_id

    def seed(
        self,
        categories: Sequence[str] = DEFAULT_SEED_CATEGORIES,
        count_per_category: int = DEFAULT_SEED_COUNT
    ) -> List[int]:
        """
        Insert synthetic products for bootstrapping.

        Each category gets ``count_per_category`` products named
        "<category> Produto <i>" with brand "Marca<i>", i starting at 1.

        Returns:
            Identifiers assigned, in insertion order
        """
        ids = []
        for category in categories:
            for i in range(1, count_per_category + 1):
                ids.append(self.insert(f"{category} Produto {i}", f"Marca{i}", category))

        logger.info(
            f"Seeded {len(ids)} products across {len(categories)} categories"
        )
        return ids

    # =========================================================================
    # SEARCH
    # =========================================================================

    def query(self, term: str, field: Union[SearchField, str]) -> List[Product]:
        """
        Find products whose ``field`` equals ``term``, ignoring case.

        Args:
            term: Exact value to match
            field: SearchField or its name ("name", "brand", "category")

        Returns:
            Matching products ordered by ascending id, without duplicates

        Raises:
            AppException: INVALID_FIELD_SELECTOR for an unknown field,
                INDEX_INCONSISTENT for a dangling id in strict mode
        """
        try:
            search_field = SearchField.parse(field)
        except AppException:
            logger.warning(f"Rejected search on unknown field {field!r}")
            raise

        ids = sorted(set(self._index.lookup(search_field, term)))

        results = []
        for product_id in ids:
            product = self._catalog.get(product_id)
            if product is None:
                logger.error(
                    f"Index inconsistency: {search_field.value} postings for "
                    f"{term.lower()!r} reference missing product {product_id}"
                )
                if self.strict_consistency:
                    raise exceptions.index_inconsistent(product_id, search_field.value)
                continue
            results.append(product)

        return results

    def get(self, product_id: int) -> Product:
        """
        Get a single product.

        Raises:
            AppException: PRODUCT_NOT_FOUND if the id was never assigned
        """
        product = self._catalog.get(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)
        return product

    # =========================================================================
    # LISTING
    # =========================================================================

    def list_all(self) -> List[Product]:
        """All products in insertion order."""
        return self._catalog.all()

    def list_by_category(self, term: str) -> List[Product]:
        """Products in a category (case-insensitive), in insertion order."""
        return self._catalog.filter_by_category(term)

    def categories(self) -> List[str]:
        """Distinct categories in first-seen order."""
        return self._catalog.categories()

    def stats(self) -> Dict:
        """Get catalog statistics."""
        per_category: Dict[str, int] = {}
        for category in self._catalog.categories():
            per_category[category] = len(self._catalog.filter_by_category(category))

        return {
            "total_products": len(self._catalog),
            "next_id": self._catalog.next_id,
            "categories": per_category,
            "index_keys": {
                field.value: self._index.key_count(field) for field in SearchField
            },
        }


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_engine_instance: Optional[SearchEngine] = None


def get_engine() -> Optional[SearchEngine]:
    """Get the global engine instance."""
    return _engine_instance


def init_engine(
    strict_consistency: bool = True,
    seed_categories: Optional[Sequence[str]] = None,
    seed_count_per_category: int = DEFAULT_SEED_COUNT
) -> SearchEngine:
    """
    Initialize the global engine instance.

    Args:
        strict_consistency: Passed to SearchEngine
        seed_categories: Categories to seed; nothing is seeded when None
        seed_count_per_category: Products generated per seeded category

    Returns:
        SearchEngine instance
    """
    global _engine_instance
    engine = SearchEngine(strict_consistency=strict_consistency)
    if seed_categories is not None:
        engine.seed(seed_categories, seed_count_per_category)
    _engine_instance = engine
    return _engine_instance
