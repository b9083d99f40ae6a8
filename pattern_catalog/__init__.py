"""Pattern Catalog - Root Package.

This package provides a small catalog of runnable demonstrations of the
classic object-oriented design patterns (Abstract Factory, Adapter, Bridge,
Builder, Composite, Decorator, Factory, Prototype, Proxy and Singleton).

Key Components:
    - domain: The PatternExample model and the catalog exceptions
    - application: The runner that executes registered examples
    - catalog: One module per design pattern demonstration
    - infrastructure: Registry, singleton access, logging and error handling
    - config: Configuration schemas and the configuration manager
    - cli: Command line interface

Usage:
    >>> from pattern_catalog.catalog import create_default_registry
    >>> from pattern_catalog.application.runner import run_one
    >>> run_one(create_default_registry(), "factory")
    ['Created product: Product A', 'Created product: Product B']
"""

from ._version import __version__

__package_name__ = "pattern-catalog"
