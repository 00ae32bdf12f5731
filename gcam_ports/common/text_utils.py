"""
Text Utilities

Helper functions for normalizing brand keys and device model names.
"""

import re
from typing import Any, Optional


def normalize_brand_key(brand: Any) -> Optional[str]:
    """
    Turn a caller-supplied brand into a catalog key.

    Args:
        brand: Brand name in any capitalization

    Returns:
        Lowercase key, or None for non-string or empty input

    Example:
        >>> normalize_brand_key("SamSung")
        'samsung'
        >>> normalize_brand_key("") is None
        True
    """
    if not brand or not isinstance(brand, str):
        return None
    return brand.lower()


def slugify_model(model: str) -> str:
    """
    Generate a URL-friendly slug from a device model name.

    Lowercases the name, replaces each run of whitespace with a single
    hyphen and drops every character other than a-z, 0-9 and hyphen.

    Args:
        model: Device model or display name

    Returns:
        URL slug

    Example:
        >>> slugify_model("Galaxy S25+ Ultra")
        'galaxy-s25-ultra'
        >>> slugify_model("Nothing Phone (2a)")
        'nothing-phone-2a'
    """
    slug = re.sub(r'\s+', '-', model.lower())
    return re.sub(r'[^a-z0-9-]', '', slug)
