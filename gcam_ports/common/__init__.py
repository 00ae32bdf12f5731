# Common utilities
from .config_loader import (
    GCamPortsOptions,
    load_client_defaults,
    load_config,
)
from .constants import BASE_URL, DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT
from .errors import CatalogLoadError, ConfigError, GCamPortsError, LiveFetchError
from .log_config import setup_logging
from .text_utils import normalize_brand_key, slugify_model
