"""Test helper package."""

from .entropy import get_entropy

__all__ = [
    "get_entropy",
]
