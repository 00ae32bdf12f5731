"""
Catalog statistics model.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class CatalogStats:
    """Aggregate counts over the catalog."""
    total_brands: int
    total_devices: int
    devices_by_brand: Dict[str, int] = field(default_factory=dict)
    supported_brands: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the stats with camelCase keys for JSON output."""
        return {
            'totalBrands': self.total_brands,
            'totalDevices': self.total_devices,
            'devicesByBrand': dict(self.devices_by_brand),
            'supportedBrands': list(self.supported_brands),
        }
