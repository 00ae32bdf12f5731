"""
Static camera port catalog.

Modules:
    store  - Catalog loading from the bundled JSON dataset
    lookup - CatalogLookup queries (brands, devices, search, stats, URLs)
"""

from .lookup import CatalogLookup
from .store import Catalog, get_default_catalog, load_catalog

__all__ = [
    'Catalog',
    'CatalogLookup',
    'get_default_catalog',
    'load_catalog',
]
