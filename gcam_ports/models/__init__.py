"""
Data models for the camera port catalog.

This module contains immutable data classes with no lookup logic.
"""

from .brand import Brand
from .device import BrandedDevice, Device, LiveDevice
from .stats import CatalogStats

__all__ = ['Brand', 'Device', 'BrandedDevice', 'LiveDevice', 'CatalogStats']
