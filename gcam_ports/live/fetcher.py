"""
Live Device Fetcher

Fetches a brand's page from gcam-ports.com and extracts the device links
it currently lists. Best effort: the page layout is not a stable API.
"""

import logging
from typing import Any, Iterable, List, Optional

import requests

from ..catalog import CatalogLookup
from ..common.constants import BASE_URL, DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT
from ..common.errors import LiveFetchError
from ..models import LiveDevice
from .parsers import Anchor, AnchorParser, SoupAnchorParser

logger = logging.getLogger(__name__)


class LiveDeviceFetcher:
    """
    Scrapes device links from a brand's download page.

    One GET per call, no retries and no caching. Every failure surfaces as
    LiveFetchError carrying the brand and the underlying message.

    Usage:
        with LiveDeviceFetcher(CatalogLookup()) as fetcher:
            devices = fetcher.fetch("samsung")
    """

    def __init__(
        self,
        lookup: CatalogLookup,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        user_agent: str = DEFAULT_USER_AGENT,
        parser: Optional[AnchorParser] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            lookup: Catalog lookup used to resolve brand pages
            timeout_ms: Request timeout in milliseconds
            user_agent: User-Agent header sent with each request
            parser: Anchor parser (default: SoupAnchorParser)
            session: requests session to use (default: a new one)
        """
        self.lookup = lookup
        self.timeout_ms = timeout_ms
        self.user_agent = user_agent
        self.base_url = BASE_URL
        self.parser = parser or SoupAnchorParser()

        # Caller-supplied sessions stay open when the fetcher closes
        self.owns_session = session is None
        self.session = session if session is not None else self.new_session()
        self.session.headers.update({"User-Agent": user_agent})

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        if self.owns_session:
            self.session.close()

    def new_session(self) -> requests.Session:
        """Create a session carrying the configured User-Agent."""
        session = requests.Session()
        session.headers.update({"User-Agent": self.user_agent})
        return session

    def fetch_isolated(self, brand: Any) -> List[LiveDevice]:
        """
        Fetch on a session of its own, closed afterwards.

        Used for calls running in worker threads, since requests sessions
        are not guaranteed thread-safe. A caller-supplied session is still
        used as is; sharing it across threads is up to the caller.
        """
        if not self.owns_session:
            return self.fetch(brand)

        with self.new_session() as session:
            return self.fetch(brand, session=session)

    def fetch(self, brand: Any, session: Optional[requests.Session] = None) -> List[LiveDevice]:
        """
        Fetch the live device list for a brand.

        Args:
            brand: Brand name. Looked up case-insensitively, but matched
                   against link targets exactly as given.
            session: Session for this call (default: the fetcher's own)

        Returns:
            Devices in document order (may be empty)

        Raises:
            LiveFetchError: If the brand is unknown (no request is made) or
                            the request, status check or parsing fails
        """
        brand_info = self.lookup.get_brand_info(brand)
        if brand_info is None:
            raise LiveFetchError(brand, f"Brand '{brand}' not supported")

        try:
            logger.info("Fetching live devices for %s from %s", brand, brand_info.url)

            response = (session or self.session).get(brand_info.url, timeout=self.timeout_ms / 1000)
            response.raise_for_status()

            anchors = self.parser.parse(response.text)
            devices = self._collect_devices(brand, anchors)
        except Exception as e:
            logger.warning("Live fetch for %s failed: %s", brand, e)
            raise LiveFetchError(brand, str(e) or type(e).__name__) from e

        logger.debug("Kept %d of %d links for %s", len(devices), len(anchors), brand)
        return devices

    def _collect_devices(self, brand: str, anchors: Iterable[Anchor]) -> List[LiveDevice]:
        """Keep links that point at the brand's pages and have visible text."""
        devices = []

        for anchor in anchors:
            href = anchor.href
            text = anchor.text.strip()

            if href and brand in href and text:
                devices.append(LiveDevice(
                    name=text,
                    url=self._resolve_url(href),
                    brand=brand,
                ))

        return devices

    def _resolve_url(self, href: str) -> str:
        """Absolute links are kept; anything else is joined to the site root."""
        if href.startswith("http"):
            return href
        return f"{self.base_url}{href}"
