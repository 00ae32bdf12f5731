"""
Anchor Parsers

Extract link targets and visible text from a brand page.

The fetcher only depends on the AnchorParser interface, so tests (or
callers with another HTML stack) can supply their own implementation.
"""

from dataclasses import dataclass
from typing import List, Protocol

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class Anchor:
    """Link found in markup: raw href and untrimmed visible text."""
    href: str
    text: str


class AnchorParser(Protocol):
    def parse(self, markup: str) -> List[Anchor]:
        ...


class SoupAnchorParser:
    """
    Parses anchors with BeautifulSoup.

    Usage:
        parser = SoupAnchorParser()
        anchors = parser.parse(html)
        # [Anchor(href='/samsung/galaxy-s25-google-camera/', text='Galaxy S25'), ...]
    """

    def __init__(self, features: str = "lxml"):
        """
        Args:
            features: BeautifulSoup tree builder
        """
        self.features = features

    def parse(self, markup: str) -> List[Anchor]:
        """
        Extract every <a> element in document order.

        Args:
            markup: HTML document

        Returns:
            Anchors; href is empty when the element has none
        """
        soup = BeautifulSoup(markup, self.features)
        return [
            Anchor(href=link.get('href') or '', text=link.get_text())
            for link in soup.find_all('a')
        ]
