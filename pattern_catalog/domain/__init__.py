"""Domain layer - pattern example model and catalog exceptions."""

from .example import PatternCategory, PatternExample

__all__ = ["PatternCategory", "PatternExample"]
