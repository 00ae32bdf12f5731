"""
Device data models.

Device is a static catalog entry, BrandedDevice a search result tagged
with its owning brand, and LiveDevice an entry scraped from a brand page.
"""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..common.constants import MIN_RELEASE_YEAR


@dataclass(frozen=True)
class Device:
    """Phone model with a camera port page."""
    name: str
    model: str
    url: str
    processor: str
    android_version: str
    release_year: int

    def matches(self, term: str) -> bool:
        """
        Check whether the name or model contains a search term.

        Args:
            term: Lowercase search term

        Returns:
            True if the term is a substring of the lowercased name or model
        """
        return term in self.name.lower() or term in self.model.lower()

    def has_plausible_release_year(self, current_year: Optional[int] = None) -> bool:
        """Release year is after 2015 and no later than next year."""
        if current_year is None:
            current_year = date.today().year
        return MIN_RELEASE_YEAR < self.release_year <= current_year + 1

    def with_brand(self, brand: str) -> 'BrandedDevice':
        """Return a copy tagged with the owning brand key."""
        return BrandedDevice(brand=brand, **asdict(self))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BrandedDevice(Device):
    """Device found by a cross-brand search."""
    brand: str


@dataclass(frozen=True)
class LiveDevice:
    """Device link scraped from a brand's live page."""
    name: str
    url: str
    brand: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
