"""
Fixed values for the gcam-ports.com site and client defaults.

Timeouts are in milliseconds; the live fetcher converts them for requests.
"""

# Site that hosts every brand and device page
BASE_URL = "https://gcam-ports.com"

# Live fetch defaults (timeout in milliseconds)
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_USER_AGENT = "gcam-ports-python/1.0.0"

# Suffix appended to every generated device page slug
DEVICE_PAGE_SUFFIX = "-google-camera"

# Release years at or below this are not expected in the catalog
MIN_RELEASE_YEAR = 2015
