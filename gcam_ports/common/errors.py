"""
Exception types raised by gcam_ports.

Lookups never raise; these cover load-time and live-fetch failures only.
"""


class GCamPortsError(Exception):
    """Base class for all package errors."""


class CatalogLoadError(GCamPortsError):
    """Bundled (or supplied) catalog data is missing or malformed."""


class ConfigError(GCamPortsError):
    """A configuration value could not be used."""


class LiveFetchError(GCamPortsError):
    """
    Live device fetch failed.

    Covers unsupported brands, transport errors, HTTP error statuses and
    markup parsing problems. The brand is kept as passed by the caller.
    """

    def __init__(self, brand, reason: str):
        self.brand = brand
        self.reason = reason
        super().__init__(f"Failed to fetch live devices for {brand}: {reason}")
