"""
GCamPorts Client

Single entry point combining the static catalog lookups with the live
brand page scraper. Lookups are synchronous and never raise; the live
fetch is a coroutine and raises LiveFetchError on failure.
"""

import asyncio
from typing import Any, List, Mapping, Optional, Tuple

import requests

from .catalog import Catalog, CatalogLookup
from .common.config_loader import GCamPortsOptions
from .common.constants import BASE_URL, DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT
from .live import AnchorParser, LiveDeviceFetcher
from .models import Brand, BrandedDevice, CatalogStats, Device, LiveDevice


class GCamPorts:
    """
    Camera port catalog client.

    Usage:
        gcam = GCamPorts(timeout=10000)

        gcam.get_devices_by_brand("samsung")
        gcam.search_devices("galaxy s25")
        gcam.get_stats().total_devices

        # Live scrape (requires network access)
        devices = await gcam.fetch_live_devices("samsung")
    """

    def __init__(
        self,
        options: Optional[GCamPortsOptions] = None,
        *,
        timeout: Optional[int] = None,
        user_agent: Optional[str] = None,
        catalog: Optional[Catalog] = None,
        parser: Optional[AnchorParser] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            options: Construction options (timeout in ms, user agent)
            timeout: Overrides options.timeout; falsy values use the default
            user_agent: Overrides options.user_agent; falsy values use the default
            catalog: Catalog to query (default: the bundled dataset)
            parser: Anchor parser for live fetches
            session: requests session for live fetches
        """
        options = options or GCamPortsOptions()

        self.base_url = BASE_URL
        self.timeout = timeout or options.timeout or DEFAULT_TIMEOUT_MS
        self.user_agent = user_agent or options.user_agent or DEFAULT_USER_AGENT

        self.lookup = CatalogLookup(catalog)
        self.live_fetcher = LiveDeviceFetcher(
            self.lookup,
            timeout_ms=self.timeout,
            user_agent=self.user_agent,
            parser=parser,
            session=session,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self.live_fetcher.close()

    # Catalog lookups

    def get_supported_brands(self) -> Mapping[str, Brand]:
        return self.lookup.get_supported_brands()

    def get_devices_by_brand(self, brand: Any) -> Tuple[Device, ...]:
        return self.lookup.get_devices_by_brand(brand)

    def get_download_url(self, brand: Any) -> Optional[str]:
        return self.lookup.get_download_url(brand)

    def get_brand_info(self, brand: Any) -> Optional[Brand]:
        return self.lookup.get_brand_info(brand)

    def is_brand_supported(self, brand: Any) -> bool:
        return self.lookup.is_brand_supported(brand)

    def get_device_count(self, brand: Any) -> int:
        return self.lookup.get_device_count(brand)

    def get_total_device_count(self) -> int:
        return self.lookup.get_total_device_count()

    def search_devices(self, query: Any) -> List[BrandedDevice]:
        return self.lookup.search_devices(query)

    def get_stats(self) -> CatalogStats:
        return self.lookup.get_stats()

    def generate_device_url(self, brand: Any, device_model: Any) -> Optional[str]:
        return self.lookup.generate_device_url(brand, device_model)

    # Live scraping

    async def fetch_live_devices(self, brand: Any) -> List[LiveDevice]:
        """
        Fetch the device list currently shown on the brand's page.

        The blocking request runs in a worker thread on a session of its
        own, so concurrent calls share no connection state. A session passed
        to the constructor is shared by every call instead.

        Args:
            brand: Brand name

        Returns:
            Scraped devices in page order

        Raises:
            LiveFetchError: If the brand is unsupported or the fetch fails
        """
        return await asyncio.to_thread(self.live_fetcher.fetch_isolated, brand)

    def fetch_live_devices_sync(self, brand: Any) -> List[LiveDevice]:
        """Blocking variant of fetch_live_devices."""
        return self.live_fetcher.fetch(brand)


def create(options: Optional[GCamPortsOptions] = None, **kwargs) -> GCamPorts:
    """Create a GCamPorts client (same arguments as the constructor)."""
    return GCamPorts(options, **kwargs)
