"""Type definitions for sqlfrags."""

from .base import FragBaseModel

__all__ = [
    "FragBaseModel",
]
