"""Utility functions and helpers for sqlfrags.

This module provides common utility functions used throughout the package.
"""

from sqlfrags.utils.text import quote_literal

__all__ = [
    "quote_literal",
]
