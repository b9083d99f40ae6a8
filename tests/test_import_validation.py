"""Basic import tests to verify package structure."""


def test_import_package():
    """Verify main package imports."""
    import pattern_catalog
    assert pattern_catalog.__version__ == "1.0.0"


def test_import_layers():
    """Verify each layer imports without circular import errors."""
    from pattern_catalog import application, catalog, cli, config, domain, infrastructure

    for module in (application, catalog, cli, config, domain, infrastructure):
        assert hasattr(module, "__doc__")


def test_catalog_modules_expose_example():
    """Every catalog module exposes an execute() and an EXAMPLE."""
    from pattern_catalog.catalog import CATALOG_MODULES

    for module in CATALOG_MODULES:
        assert callable(module.execute)
        assert module.EXAMPLE.execute is module.execute
