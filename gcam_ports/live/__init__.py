"""
Live scraping of brand pages on gcam-ports.com.

Modules:
    fetcher - LiveDeviceFetcher (HTTP GET + link filtering)
    parsers - AnchorParser interface and the BeautifulSoup implementation
"""

from .fetcher import LiveDeviceFetcher
from .parsers import Anchor, AnchorParser, SoupAnchorParser

__all__ = [
    'Anchor',
    'AnchorParser',
    'LiveDeviceFetcher',
    'SoupAnchorParser',
]
