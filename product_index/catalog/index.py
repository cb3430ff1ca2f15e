"""
==============================================================================
Secondary Index Module
==============================================================================

Exact-match postings for the name, brand and category fields.

Each field maps a lowercased term to the identifiers of the products
carrying that value, in insertion order.

==============================================================================
"""

from __future__ import annotations

from typing import Dict, List

from .models import SearchField


class IndexSet:
    """
    One term -> postings mapping per indexed field.

    Keys are always stored lowercased, and lookups lowercase the
    requested term the same way.

    Example:
        >>> index = IndexSet()
        >>> index.add_entry(SearchField.BRAND, "Acme", 1)
        >>> index.lookup(SearchField.BRAND, "ACME")
        [1]
    """

    def __init__(self) -> None:
        self._postings: Dict[SearchField, Dict[str, List[int]]] = {
            field: {} for field in SearchField
        }

    def add_entry(self, field: SearchField, key: str, product_id: int) -> None:
        """Append ``product_id`` to the postings list of ``key``."""
        self._postings[field].setdefault(key.lower(), []).append(product_id)

    def lookup(self, field: SearchField, key: str) -> List[int]:
        """Get a copy of the postings for ``key``, empty if absent."""
        return list(self._postings[field].get(key.lower(), ()))

    def key_count(self, field: SearchField) -> int:
        """Number of distinct terms indexed for a field."""
        return len(self._postings[field])
