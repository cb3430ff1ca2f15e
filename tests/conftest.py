"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides engine, seeded engine and API client fixtures.

==============================================================================
"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from product_index.main import app
from product_index.catalog.engine import SearchEngine
from product_index.core.dependencies import get_engine


# ============================================================================
# ENGINE FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def engine() -> SearchEngine:
    """Fresh engine with no products."""
    return SearchEngine()


@pytest.fixture(scope="function")
def seeded_engine() -> SearchEngine:
    """Engine seeded with categories A and B, five products each (ids 1-10)."""
    seeded = SearchEngine()
    seeded.seed(["A", "B"], 5)
    return seeded


@pytest.fixture(scope="function")
def phones(engine: SearchEngine) -> SearchEngine:
    """Engine holding two Acme phones (ids 1 and 2)."""
    engine.insert("Phone X", "Acme", "Celulares")
    engine.insert("Phone Y", "Acme", "Celulares")
    return engine


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client(engine: SearchEngine) -> Generator[TestClient, None, None]:
    """Create test client backed by the function-scoped engine."""
    app.dependency_overrides[get_engine] = lambda: engine

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
