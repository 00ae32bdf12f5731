"""
Catalog Store

Loads the bundled brand and device dataset into immutable record types.

Expected files (in the data directory):
    brands.json  - {brand_key: {name, url, description, processor_types, popular_series}}
    devices.json - {brand_key: [{name, model, url, processor, android_version, release_year}]}

Loading is all-or-nothing: any malformed entry raises CatalogLoadError.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..common.errors import CatalogLoadError
from ..models import Brand, Device

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / 'data'
BRANDS_FILE = 'brands.json'
DEVICES_FILE = 'devices.json'

BRAND_STRING_FIELDS = ('name', 'url', 'description')
BRAND_LIST_FIELDS = ('processor_types', 'popular_series')
DEVICE_STRING_FIELDS = ('name', 'model', 'url', 'processor', 'android_version')


@dataclass(frozen=True)
class Catalog:
    """
    Read-only brand and device data.

    Attributes:
        brands: Brand key -> Brand, in dataset order
        devices: Brand key -> tuple of Devices, in dataset order
    """
    brands: Mapping[str, Brand] = field(default_factory=lambda: MappingProxyType({}))
    devices: Mapping[str, Tuple[Device, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_records(
        cls,
        brands: Mapping[str, Brand],
        devices: Mapping[str, Any],
    ) -> 'Catalog':
        """Freeze already-built records into a Catalog (no key cross-check)."""
        return cls(
            brands=MappingProxyType(dict(brands)),
            devices=MappingProxyType({key: tuple(items) for key, items in devices.items()}),
        )


def _read_json(path: Path) -> Any:
    """Read a JSON file, raising CatalogLoadError on any failure."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        raise CatalogLoadError(f"Catalog file not found: {path}") from None
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogLoadError(f"Cannot read {path.name}: {e}") from e


def _require_str(data: Dict[str, Any], name: str, where: str) -> str:
    value = data.get(name)
    if not isinstance(value, str):
        raise CatalogLoadError(f"{where}: field '{name}' must be a string")
    return value


def _build_brand(key: str, data: Any) -> Brand:
    """Build a Brand from its JSON object."""
    where = f"{BRANDS_FILE} [{key}]"
    if not isinstance(data, dict):
        raise CatalogLoadError(f"{where}: expected an object")

    values = {name: _require_str(data, name, where) for name in BRAND_STRING_FIELDS}

    for name in BRAND_LIST_FIELDS:
        items = data.get(name)
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            raise CatalogLoadError(f"{where}: field '{name}' must be a list of strings")
        values[name] = tuple(items)

    return Brand(key=key, **values)


def _build_device(key: str, index: int, data: Any) -> Device:
    """Build a Device from its JSON object."""
    where = f"{DEVICES_FILE} [{key}][{index}]"
    if not isinstance(data, dict):
        raise CatalogLoadError(f"{where}: expected an object")

    values = {name: _require_str(data, name, where) for name in DEVICE_STRING_FIELDS}

    # bool is an int subclass; reject it explicitly
    release_year = data.get('release_year')
    if not isinstance(release_year, int) or isinstance(release_year, bool):
        raise CatalogLoadError(f"{where}: field 'release_year' must be an integer")

    return Device(release_year=release_year, **values)


def _check_key(key: Any, filename: str) -> None:
    if not isinstance(key, str) or not key or key != key.lower():
        raise CatalogLoadError(f"{filename}: brand key {key!r} must be a non-empty lowercase string")


def load_catalog(data_dir: Optional[Union[str, Path]] = None) -> Catalog:
    """
    Load the brand and device catalog.

    Args:
        data_dir: Directory holding brands.json and devices.json
                  (default: the dataset bundled with the package)

    Returns:
        Immutable Catalog

    Raises:
        CatalogLoadError: If a file is missing, unreadable or malformed, or a
                          device list belongs to a brand that is not defined
    """
    data_path = Path(data_dir) if data_dir is not None else DATA_DIR

    raw_brands = _read_json(data_path / BRANDS_FILE)
    raw_devices = _read_json(data_path / DEVICES_FILE)

    if not isinstance(raw_brands, dict):
        raise CatalogLoadError(f"{BRANDS_FILE}: expected an object keyed by brand")
    if not isinstance(raw_devices, dict):
        raise CatalogLoadError(f"{DEVICES_FILE}: expected an object keyed by brand")

    brands = {}
    for key, data in raw_brands.items():
        _check_key(key, BRANDS_FILE)
        brands[key] = _build_brand(key, data)

    devices = {}
    for key, items in raw_devices.items():
        _check_key(key, DEVICES_FILE)
        if key not in brands:
            raise CatalogLoadError(f"{DEVICES_FILE}: devices listed for unknown brand '{key}'")
        if not isinstance(items, list):
            raise CatalogLoadError(f"{DEVICES_FILE} [{key}]: expected a list of devices")
        devices[key] = tuple(_build_device(key, i, item) for i, item in enumerate(items))

    catalog = Catalog.from_records(brands, devices)
    logger.debug(
        "Loaded %d brands and %d devices from %s",
        len(catalog.brands), sum(len(d) for d in catalog.devices.values()), data_path,
    )
    return catalog


_default_catalog: Optional[Catalog] = None


def get_default_catalog() -> Catalog:
    """
    Get the bundled catalog, loading it on first use.

    Returns:
        Shared Catalog instance
    """
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = load_catalog()
    return _default_catalog
