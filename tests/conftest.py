"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from gcam_ports.catalog import Catalog
from gcam_ports.models import Brand, Device

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def brand_page_html():
    """Load the Samsung brand page HTML fixture."""
    return (FIXTURES_DIR / "brand_page.html").read_text(encoding="utf-8")


@pytest.fixture
def sample_brand_data():
    """Brand map in the bundled dataset shape."""
    return {
        "testbrand": {
            "name": "Test Brand",
            "url": "https://gcam-ports.com/download-gcam-ports-for-test-phones/",
            "description": "Test brand for unit testing",
            "processor_types": ["Snapdragon"],
            "popular_series": ["Test Series"],
        },
        "otherbrand": {
            "name": "Other Brand",
            "url": "https://gcam-ports.com/download-gcam-ports-for-otherbrand-phones/",
            "description": "Second test brand",
            "processor_types": ["MediaTek", "Dimensity"],
            "popular_series": ["Other"],
        },
    }


@pytest.fixture
def sample_device_data():
    """Device map in the bundled dataset shape."""
    return {
        "testbrand": [
            {
                "name": "Test Device",
                "model": "TEST-001",
                "url": "https://gcam-ports.com/testbrand/test-device-google-camera/",
                "processor": "Snapdragon 8 Gen 3",
                "android_version": "14",
                "release_year": 2024,
            },
            {
                "name": "Test Phone Pro 13",
                "model": "TEST-013",
                "url": "https://gcam-ports.com/testbrand/test-phone-pro-13-google-camera/",
                "processor": "Snapdragon 8 Gen 2",
                "android_version": "13",
                "release_year": 2023,
            },
        ],
        "otherbrand": [
            {
                "name": "Other 13 Lite",
                "model": "OTH-13L",
                "url": "https://gcam-ports.com/otherbrand/other-13-lite-google-camera/",
                "processor": "Dimensity 7200",
                "android_version": "14",
                "release_year": 2024,
            },
        ],
    }


@pytest.fixture
def write_dataset(tmp_path):
    """Write brands.json/devices.json into tmp_path and return the directory."""
    def _write(brands, devices):
        (tmp_path / "brands.json").write_text(json.dumps(brands), encoding="utf-8")
        (tmp_path / "devices.json").write_text(json.dumps(devices), encoding="utf-8")
        return tmp_path
    return _write


@pytest.fixture
def sample_catalog(sample_brand_data, sample_device_data):
    """Small in-memory catalog (no file I/O)."""
    brands = {
        key: Brand(
            key=key,
            name=data["name"],
            url=data["url"],
            description=data["description"],
            processor_types=tuple(data["processor_types"]),
            popular_series=tuple(data["popular_series"]),
        )
        for key, data in sample_brand_data.items()
    }
    devices = {
        key: [Device(**item) for item in items]
        for key, items in sample_device_data.items()
    }
    return Catalog.from_records(brands, devices)
