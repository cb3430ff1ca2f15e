"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the search engine.

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(engine: SearchEngine = Depends(get_engine)):
        return engine.list_all()

Tests replace ``get_engine`` through ``app.dependency_overrides`` to
run each case against a fresh engine.

==============================================================================
"""

from __future__ import annotations

import logging

from product_index.catalog import engine as engine_module
from product_index.catalog.engine import SearchEngine
from product_index.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_engine() -> SearchEngine:
    """
    FastAPI dependency returning the global search engine.

    Raises:
        AppException: CATALOG_NOT_LOADED if startup has not built the engine
    """
    engine = engine_module.get_engine()
    if engine is None:
        logger.error("Search engine requested before initialization")
        raise exceptions.catalog_not_loaded()
    return engine

