"""Product catalogue factory.

Provides get_catalog() / set_catalog() to swap implementations:
- RepositoryProductCatalog, reading the Product aggregate (default)
- FakeProductCatalog for development and testing
"""

from commerce.catalog.port import ProductCatalog, ProductInfo
from commerce.catalog.repository_adapter import RepositoryProductCatalog

__all__ = ["ProductCatalog", "ProductInfo", "get_catalog", "reset_catalog", "set_catalog"]

_current_catalog: ProductCatalog | None = None


def get_catalog() -> ProductCatalog:
    """Return the current product catalogue. Defaults to RepositoryProductCatalog."""
    global _current_catalog
    if _current_catalog is None:
        _current_catalog = RepositoryProductCatalog()
    return _current_catalog


def set_catalog(catalog: ProductCatalog) -> None:
    """Override the active catalogue (useful for tests)."""
    global _current_catalog
    _current_catalog = catalog


def reset_catalog() -> None:
    global _current_catalog
    _current_catalog = None
