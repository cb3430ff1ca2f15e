"""
==============================================================================
Search Engine Tests
==============================================================================

Tests for insertion, exact-match queries, listings and seeding.

==============================================================================
"""

import logging

import pytest

from product_index.catalog import SearchEngine, SearchField
from product_index.catalog import engine as engine_module
from product_index.catalog.engine import DEFAULT_SEED_CATEGORIES, init_engine
from product_index.core.exceptions import AppException


class TestInsert:
    """Tests for SearchEngine.insert."""

    def test_ids_are_one_to_n(self, engine: SearchEngine):
        ids = [engine.insert(f"P{i}", f"B{i % 3}", f"C{i % 2}") for i in range(25)]
        assert ids == list(range(1, 26))
        assert len(set(ids)) == 25

    def test_inserted_product_visible_everywhere(self, engine: SearchEngine):
        product_id = engine.insert("Mouse Pro", "Logi", "Periféricos")

        assert product_id in [p.id for p in engine.list_all()]
        assert product_id in [p.id for p in engine.query("Mouse Pro", SearchField.NAME)]
        assert product_id in [p.id for p in engine.query("Logi", SearchField.BRAND)]
        assert product_id in [p.id for p in engine.query("Periféricos", SearchField.CATEGORY)]

    def test_empty_strings_are_indexed(self, engine: SearchEngine):
        product_id = engine.insert("", "", "")
        assert [p.id for p in engine.query("", "name")] == [product_id]

    def test_get(self, phones: SearchEngine):
        assert phones.get(2).name == "Phone Y"

    def test_get_unknown_id(self, phones: SearchEngine):
        with pytest.raises(AppException) as exc_info:
            phones.get(3)
        assert exc_info.value.code == "PRODUCT_NOT_FOUND"
        assert exc_info.value.status_code == 404


class TestQuery:
    """Tests for SearchEngine.query."""

    def test_phone_scenario(self, phones: SearchEngine):
        by_brand = phones.query("acme", SearchField.BRAND)
        assert [p.id for p in by_brand] == [1, 2]
        assert by_brand[0].name == "Phone X"

        by_category = phones.query("Celulares", SearchField.CATEGORY)
        assert by_category == by_brand

        assert phones.query("nokia", SearchField.BRAND) == []

    def test_case_insensitive(self, phones: SearchEngine):
        assert phones.query("ACME", "brand") == phones.query("acme", "brand")
        assert phones.query("phone x", "name") == phones.query("PHONE X", "name")

    def test_exact_match_only(self, phones: SearchEngine):
        assert phones.query("Phone", "name") == []
        assert phones.query("Acm", "brand") == []

    def test_empty_engine(self, engine: SearchEngine):
        assert engine.list_all() == []
        assert engine.query("x", SearchField.NAME) == []

    def test_results_sorted_and_unique(self, engine: SearchEngine):
        engine.insert("n1", "Acme", "c")
        engine.insert("n2", "Other", "c")
        engine.insert("n3", "acme", "c")
        # Force duplicate and out-of-order postings
        engine._index.add_entry(SearchField.BRAND, "acme", 1)
        engine._index.add_entry(SearchField.BRAND, "ACME", 3)
        engine._index._postings[SearchField.BRAND]["acme"].reverse()

        ids = [p.id for p in engine.query("Acme", SearchField.BRAND)]
        assert ids == [1, 3]

    def test_field_accepts_names_and_menu_numbers(self, phones: SearchEngine):
        expected = phones.query("acme", SearchField.BRAND)
        assert phones.query("acme", "brand") == expected
        assert phones.query("acme", "BRAND") == expected
        assert phones.query("acme", "2") == expected

    def test_invalid_field_raises(self, phones: SearchEngine, caplog):
        with caplog.at_level(logging.WARNING):
            with pytest.raises(AppException) as exc_info:
                phones.query("acme", "price")

        assert exc_info.value.code == "INVALID_FIELD_SELECTOR"
        assert exc_info.value.details == {"field": "price"}
        assert "unknown field" in caplog.text

    def test_dangling_id_raises_in_strict_mode(self, phones: SearchEngine, caplog):
        phones._index.add_entry(SearchField.BRAND, "acme", 42)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(AppException) as exc_info:
                phones.query("acme", SearchField.BRAND)

        assert exc_info.value.code == "INDEX_INCONSISTENT"
        assert exc_info.value.details == {"product_id": 42, "field": "brand"}
        assert "missing product 42" in caplog.text

    def test_dangling_id_skipped_when_lenient(self, caplog):
        lenient = SearchEngine(strict_consistency=False)
        lenient.insert("Phone X", "Acme", "Celulares")
        lenient._index.add_entry(SearchField.BRAND, "acme", 42)

        with caplog.at_level(logging.ERROR):
            results = lenient.query("acme", SearchField.BRAND)

        assert [p.id for p in results] == [1]
        assert "missing product 42" in caplog.text


class TestListing:
    """Tests for list_all, list_by_category, categories and stats."""

    def test_seed_scenario(self, seeded_engine: SearchEngine):
        assert [p.id for p in seeded_engine.list_all()] == list(range(1, 11))

        category_a = seeded_engine.list_by_category("A")
        assert [p.id for p in category_a] == [1, 2, 3, 4, 5]
        assert all(p.category == "A" for p in category_a)

    def test_seed_names_and_brands(self, seeded_engine: SearchEngine):
        first_b = seeded_engine.get(6)
        assert first_b.name == "B Produto 1"
        assert first_b.brand == "Marca1"
        assert first_b.category == "B"
        assert [p.id for p in seeded_engine.query("marca3", "brand")] == [3, 8]

    def test_seed_returns_ids(self, engine: SearchEngine):
        assert engine.seed(["X"], 3) == [1, 2, 3]
        assert engine.seed(["Y"], 0) == []

    def test_default_seed(self, engine: SearchEngine):
        engine.seed()
        assert len(engine) == 15
        assert engine.categories() == list(DEFAULT_SEED_CATEGORIES)

    def test_category_filter_matches_list_all(self, engine: SearchEngine):
        engine.insert("a", "x", "Tools")
        engine.insert("b", "x", "Garden")
        engine.insert("c", "x", "TOOLS")
        engine.insert("d", "x", "tools")

        expected = [p for p in engine.list_all() if p.category.lower() == "tools"]
        assert engine.list_by_category("Tools") == expected
        assert [p.id for p in expected] == [1, 3, 4]
        assert engine.list_by_category("Kitchen") == []

    def test_stats(self, seeded_engine: SearchEngine):
        stats = seeded_engine.stats()
        assert stats["total_products"] == 10
        assert stats["next_id"] == 11
        assert stats["categories"] == {"A": 5, "B": 5}
        assert stats["index_keys"] == {"name": 10, "brand": 5, "category": 2}


class TestEngineSingleton:
    """Tests for init_engine / get_engine."""

    def test_init_engine_replaces_global(self):
        first = init_engine()
        assert engine_module.get_engine() is first
        assert len(first) == 0

        second = init_engine(seed_categories=["A"], seed_count_per_category=2)
        assert engine_module.get_engine() is second
        assert len(second) == 2

    def test_init_engine_passes_strict_flag(self):
        engine = init_engine(strict_consistency=False)
        assert engine.strict_consistency is False
