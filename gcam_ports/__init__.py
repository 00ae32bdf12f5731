"""
GCam Ports Catalog

Brand-organized catalog of Google Camera ports, backed by a bundled
dataset, with an optional live scrape of gcam-ports.com brand pages.

Modules:
    models  - Data models (Brand, Device, BrandedDevice, LiveDevice, CatalogStats)
    common  - Shared utilities (config loader, logging, errors, text helpers)
    catalog - Catalog loading and lookup queries
    live    - Live brand page fetching and link parsing
    client  - GCamPorts client combining catalog and live fetch
    cli     - Command-line interface
"""

from typing import Any, Mapping, Optional, Tuple

from .catalog import Catalog, CatalogLookup, get_default_catalog, load_catalog
from .client import GCamPorts, create
from .common.config_loader import GCamPortsOptions, load_client_defaults
from .common.errors import CatalogLoadError, ConfigError, GCamPortsError, LiveFetchError
from .models import Brand, BrandedDevice, CatalogStats, Device, LiveDevice

__version__ = "1.0.0"

_catalog = get_default_catalog()
_lookup = CatalogLookup(_catalog)

# Read-only views of the bundled dataset
brands = _catalog.brands
devices = _catalog.devices


def get_supported_brands() -> Mapping[str, Brand]:
    """Return every brand in the bundled catalog."""
    return _lookup.get_supported_brands()


def get_devices_by_brand(brand: Any) -> Tuple[Device, ...]:
    """Return a brand's devices, or an empty tuple if the brand is unknown."""
    return _lookup.get_devices_by_brand(brand)


def get_download_url(brand: Any) -> Optional[str]:
    """Return a brand's download page URL, or None if the brand is unknown."""
    return _lookup.get_download_url(brand)


__all__ = [
    # Client
    'GCamPorts',
    'GCamPortsOptions',
    'create',
    'load_client_defaults',
    # Catalog
    'Catalog',
    'CatalogLookup',
    'load_catalog',
    'brands',
    'devices',
    'get_supported_brands',
    'get_devices_by_brand',
    'get_download_url',
    # Models
    'Brand',
    'Device',
    'BrandedDevice',
    'LiveDevice',
    'CatalogStats',
    # Errors
    'GCamPortsError',
    'CatalogLoadError',
    'ConfigError',
    'LiveFetchError',
]
