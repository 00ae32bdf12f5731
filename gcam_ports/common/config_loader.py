"""
Configuration Loader

Loads YAML configuration bundled with the package and builds client
options, applying environment overrides (optionally from a .env file).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT
from .errors import ConfigError

TIMEOUT_ENV_VAR = "GCAM_PORTS_TIMEOUT"
USER_AGENT_ENV_VAR = "GCAM_PORTS_USER_AGENT"


@dataclass
class GCamPortsOptions:
    """Client construction options. Timeout is in milliseconds."""
    timeout: int = DEFAULT_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT


def _get_config_dir() -> Path:
    """Get the bundled config directory path."""
    config_dir = Path(__file__).parent.parent / 'config'

    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")

    return config_dir


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'settings.yaml')

    Returns:
        Parsed YAML content as dictionary (empty if the file is empty)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _parse_timeout(value: Any, source: str) -> int:
    """Coerce a timeout setting to a positive integer of milliseconds."""
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout in {source}: {value!r}") from None

    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive in {source}: {value!r}")

    return timeout


def load_client_defaults(env_file: Optional[str] = None) -> GCamPortsOptions:
    """
    Build client options from settings.yaml and the environment.

    Environment variables GCAM_PORTS_TIMEOUT and GCAM_PORTS_USER_AGENT take
    precedence over the YAML values. A .env file is read first; variables
    already set in the environment are not overwritten by it.

    Args:
        env_file: Path to a .env file (default: search from the working directory)

    Returns:
        GCamPortsOptions with resolved values

    Raises:
        ConfigError: If a timeout value is not a positive integer
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    client = load_config('settings.yaml').get('client') or {}

    timeout = _parse_timeout(client.get('timeout_ms', DEFAULT_TIMEOUT_MS), 'settings.yaml')
    user_agent = client.get('user_agent') or DEFAULT_USER_AGENT

    env_timeout = os.environ.get(TIMEOUT_ENV_VAR)
    if env_timeout:
        timeout = _parse_timeout(env_timeout, TIMEOUT_ENV_VAR)

    env_user_agent = os.environ.get(USER_AGENT_ENV_VAR)
    if env_user_agent:
        user_agent = env_user_agent

    return GCamPortsOptions(timeout=timeout, user_agent=user_agent)
