"""
Brand data model.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Brand:
    """Phone manufacturer with its download page and chipset/series labels."""
    key: str
    name: str
    url: str
    description: str
    processor_types: Tuple[str, ...] = ()
    popular_series: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Return the record in the bundled dataset shape (key excluded)."""
        return {
            'name': self.name,
            'url': self.url,
            'description': self.description,
            'processor_types': list(self.processor_types),
            'popular_series': list(self.popular_series),
        }
