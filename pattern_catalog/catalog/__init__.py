"""
Catalog of design pattern demonstrations.

Each module defines the classes of one pattern, an ``execute()`` function
that wires them together, and an ``EXAMPLE`` wrapping it for registration.
"""

from typing import List

from pattern_catalog.catalog import (
    abstract_factory,
    adapter,
    bridge,
    builder,
    composite,
    decorator,
    factory,
    prototype,
    proxy,
    singleton,
)
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry

CATALOG_MODULES = (
    abstract_factory,
    adapter,
    bridge,
    builder,
    composite,
    decorator,
    factory,
    prototype,
    proxy,
    singleton,
)


def get_examples() -> List[PatternExample]:
    """Get every catalog example in default run order."""
    return [module.EXAMPLE for module in CATALOG_MODULES]


def create_default_registry() -> PatternRegistry:
    """Create a registry holding every catalog example."""
    registry = PatternRegistry()
    for example in get_examples():
        registry.register(example)
    return registry


__all__ = ["CATALOG_MODULES", "get_examples", "create_default_registry"]
