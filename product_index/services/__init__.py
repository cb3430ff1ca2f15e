"""
==============================================================================
Services Package
==============================================================================

Front ends built on top of the search engine.

This package provides:
- ShellSession: Interactive terminal menu

==============================================================================
"""

from .shell import ShellSession, format_product

__all__ = [
    "ShellSession",
    "format_product",
]
