"""
Pytest configuration and shared fixtures.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from pattern_catalog.domain.example import PatternCategory, PatternExample
from pattern_catalog.infrastructure.patterns.singleton_access import reset_singletons
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


@pytest.fixture(autouse=True)
def clean_singletons():
    """Every test starts without process-wide singleton instances."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def registry():
    """An empty pattern registry."""
    return PatternRegistry()


@pytest.fixture
def factory_example():
    """Example producing the factory pattern's output."""
    return PatternExample(
        name="factory",
        execute=lambda: ["Created product: Product A", "Created product: Product B"],
        category=PatternCategory.CREATIONAL,
    )


@pytest.fixture
def failing_example():
    """Example whose execute() raises."""
    def explode():
        raise RuntimeError("boom")

    return PatternExample(name="broken", execute=explode)


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after setup_logging() calls."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if isinstance(handler, RotatingFileHandler):
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
