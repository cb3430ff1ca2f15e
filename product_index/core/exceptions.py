"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the API and the shell.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404, {"product_id": 7})

    Error Codes:
        Search:
            - INVALID_FIELD_SELECTOR (400)

        Catalog:
            - PRODUCT_NOT_FOUND (404)
            - INDEX_INCONSISTENT (500)
            - CATALOG_NOT_LOADED (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_field_selector(field: Any) -> AppException:
    """Create invalid search field exception."""
    return AppException(
        f"Invalid search field: {field!r}. Expected one of: name, brand, category",
        "INVALID_FIELD_SELECTOR",
        400,
        {"field": str(field)}
    )


def product_not_found(product_id: int) -> AppException:
    """Create product not found exception."""
    return AppException(
        "Product not found",
        "PRODUCT_NOT_FOUND",
        404,
        {"product_id": product_id}
    )


def index_inconsistent(product_id: int, field: str) -> AppException:
    """Create exception for a postings id with no catalog entry."""
    return AppException(
        f"Index entry {product_id} has no matching product",
        "INDEX_INCONSISTENT",
        500,
        {"product_id": product_id, "field": field}
    )


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        500
    )
