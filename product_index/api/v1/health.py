"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

Health and readiness resolve the engine through ``get_engine``, so
before startup they answer with CATALOG_NOT_LOADED (500).

==============================================================================
"""

from fastapi import APIRouter, Depends

from product_index.catalog.engine import SearchEngine
from product_index.core.dependencies import get_engine


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, engine: SearchEngine):
        self._engine = engine

    def get_health(self) -> dict:
        """Get full health status."""
        return {
            "status": "healthy",
            "components": {
                "api": "healthy",
                "catalog": "healthy"
            },
            "details": {
                "products_loaded": len(self._engine)
            }
        }


@router.get("")
async def health_check(engine: SearchEngine = Depends(get_engine)):
    """
    Health check endpoint.

    Returns system status including API and catalog.
    """
    return HealthController(engine).get_health()


@router.get("/ready")
async def readiness_check(engine: SearchEngine = Depends(get_engine)):
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
