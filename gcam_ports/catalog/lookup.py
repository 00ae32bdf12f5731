"""
Catalog Lookup

Read-only queries over a Catalog: brand lookups, device listings,
cross-brand search, statistics and device page URL generation.

Every query is total. Invalid input (None, empty or non-string values)
yields an empty, None, False or zero result instead of an exception.
Brand names are matched case-insensitively.
"""

from typing import Any, List, Mapping, Optional, Tuple

from ..common.constants import BASE_URL, DEVICE_PAGE_SUFFIX
from ..common.text_utils import normalize_brand_key, slugify_model
from ..models import Brand, BrandedDevice, CatalogStats, Device
from .store import Catalog, get_default_catalog


class CatalogLookup:
    """
    Queries over the brand and device catalog.

    Usage:
        lookup = CatalogLookup()
        lookup.is_brand_supported("Samsung")       # True
        lookup.search_devices("galaxy s25")        # [BrandedDevice(...), ...]
        lookup.generate_device_url("samsung", "Galaxy S25")
        # 'https://gcam-ports.com/samsung/galaxy-s25-google-camera/'
    """

    def __init__(self, catalog: Optional[Catalog] = None):
        """
        Initialize the lookup.

        Args:
            catalog: Catalog to query. If None, uses the bundled catalog.
        """
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.base_url = BASE_URL

    def get_supported_brands(self) -> Mapping[str, Brand]:
        """Return the full brand catalog in dataset order."""
        return self.catalog.brands

    def get_devices_by_brand(self, brand: Any) -> Tuple[Device, ...]:
        """
        Get devices for a brand.

        Args:
            brand: Brand name (e.g., 'samsung', 'OnePlus')

        Returns:
            Devices in dataset order, or an empty tuple if the brand is unknown
        """
        key = normalize_brand_key(brand)
        if key is None:
            return ()
        return self.catalog.devices.get(key, ())

    def get_brand_info(self, brand: Any) -> Optional[Brand]:
        """Get the Brand record, or None if the brand is unknown."""
        key = normalize_brand_key(brand)
        if key is None:
            return None
        return self.catalog.brands.get(key)

    def get_download_url(self, brand: Any) -> Optional[str]:
        """Get the brand's download page URL, or None if the brand is unknown."""
        info = self.get_brand_info(brand)
        return info.url if info else None

    def is_brand_supported(self, brand: Any) -> bool:
        return self.get_brand_info(brand) is not None

    def get_device_count(self, brand: Any) -> int:
        return len(self.get_devices_by_brand(brand))

    def get_total_device_count(self) -> int:
        # Devices under keys with no brand record are not counted
        return sum(len(self.catalog.devices.get(key, ())) for key in self.catalog.brands)

    def search_devices(self, query: Any) -> List[BrandedDevice]:
        """
        Search devices across all brands.

        Matches the query as a case-insensitive substring of each device's
        name or model. Brands are scanned in catalog order and devices in
        dataset order.

        Args:
            query: Search text (e.g., "13", "galaxy s25")

        Returns:
            Matching devices tagged with their brand key. Empty for an
            empty, whitespace-only or non-string query.
        """
        if not isinstance(query, str) or not query.strip():
            return []

        term = query.lower()
        results = []
        for key in self.catalog.brands:
            for device in self.catalog.devices.get(key, ()):
                if device.matches(term):
                    results.append(device.with_brand(key))

        return results

    def get_stats(self) -> CatalogStats:
        """
        Return catalog statistics.

        Returns:
            CatalogStats with brand and device totals, per-brand device
            counts and the list of supported brand keys
        """
        brand_keys = list(self.catalog.brands)
        return CatalogStats(
            total_brands=len(brand_keys),
            total_devices=self.get_total_device_count(),
            devices_by_brand={key: len(self.catalog.devices.get(key, ())) for key in brand_keys},
            supported_brands=brand_keys,
        )

    def generate_device_url(self, brand: Any, device_model: Any) -> Optional[str]:
        """
        Generate the device page URL for a brand and model name.

        Args:
            brand: Brand name (any capitalization)
            device_model: Device model or display name

        Returns:
            URL of the form {base}/{brand}/{model-slug}-google-camera/,
            or None if the brand is unknown or the model is not a string

        Example:
            >>> lookup.generate_device_url("Samsung", "Galaxy S25+ Ultra")
            'https://gcam-ports.com/samsung/galaxy-s25-ultra-google-camera/'
        """
        if not self.is_brand_supported(brand) or not isinstance(device_model, str):
            return None

        return f"{self.base_url}/{brand.lower()}/{slugify_model(device_model)}{DEVICE_PAGE_SUFFIX}/"
