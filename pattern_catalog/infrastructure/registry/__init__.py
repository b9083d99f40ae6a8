"""Infrastructure registry patterns."""

from .pattern_registry import PatternRegistry

__all__ = [
    'PatternRegistry'
]
