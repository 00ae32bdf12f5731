#!/usr/bin/env python3
"""
Demo Script - Camera Port Catalog

Walks through the catalog lookups using the bundled dataset.
Pass --live to also scrape the Samsung brand page (requires internet).

Usage:
    python scripts/demo.py
    python scripts/demo.py --live
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gcam_ports import GCamPorts, LiveFetchError, get_devices_by_brand, get_supported_brands  # noqa: I001
from gcam_ports.common.log_config import setup_logging


def run_lookups(gcam: GCamPorts) -> None:
    print("1. Supported Brands:")
    for key, brand in get_supported_brands().items():
        print(f"   - {brand.name} ({gcam.get_device_count(key)} devices)")
    print()

    print("2. Samsung Devices (first 5):")
    for device in get_devices_by_brand("samsung")[:5]:
        print(f"   - {device.name} ({device.processor})")
    print()

    print('3. Search Results for "Galaxy S25":')
    for device in gcam.search_devices("Galaxy S25"):
        print(f"   - {device.name} ({device.brand.upper()})")
    print()

    print("4. Download URLs:")
    print(f"   - OnePlus: {gcam.get_download_url('oneplus')}")
    print(f"   - Xiaomi: {gcam.get_download_url('xiaomi')}")
    print()

    print("5. Package Statistics:")
    stats = gcam.get_stats()
    print(f"   - Total Brands: {stats.total_brands}")
    print(f"   - Total Devices: {stats.total_devices}")
    print("   - Top 3 Brands by Device Count:")
    top = sorted(stats.devices_by_brand.items(), key=lambda item: item[1], reverse=True)[:3]
    for brand, count in top:
        print(f"     * {brand}: {count} devices")
    print()

    print("6. Generated Device URLs:")
    print(f"   - Samsung Galaxy S25: {gcam.generate_device_url('samsung', 'Galaxy S25')}")
    print(f"   - OnePlus 13: {gcam.generate_device_url('oneplus', 'OnePlus 13')}")
    print()

    print("7. Brand Support Check:")
    print(f"   - Is Samsung supported? {gcam.is_brand_supported('samsung')}")
    print(f"   - Is Apple supported? {gcam.is_brand_supported('apple')}")
    print()

    print("8. Brand Information - OnePlus:")
    info = gcam.get_brand_info("oneplus")
    if info:
        print(f"   - Name: {info.name}")
        print(f"   - Description: {info.description}")
        print(f"   - Processor Types: {', '.join(info.processor_types)}")
        print(f"   - Popular Series: {', '.join(info.popular_series)}")
    print()


async def run_live(gcam: GCamPorts) -> None:
    print("9. Fetching Live Device Data:")
    try:
        devices = await gcam.fetch_live_devices("samsung")
    except LiveFetchError as e:
        print(f"   Error fetching live data: {e}")
        return

    print(f"   Found {len(devices)} devices from live data")
    if devices:
        print(f"   First device: {devices[0].name}")


def main():
    parser = argparse.ArgumentParser(description="Camera port catalog demo")
    parser.add_argument("--live", action="store_true", help="Also fetch the live Samsung page")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--show-http", action="store_true", help="Include HTTP connection logs (with --live)")
    args = parser.parse_args()

    setup_logging(verbose=args.verbose, show_http=args.show_http)

    print("=" * 60)
    print("GCam Ports Catalog Demo")
    print("=" * 60)
    print()

    with GCamPorts() as gcam:
        run_lookups(gcam)
        if args.live:
            asyncio.run(run_live(gcam))

    print("For more information, visit: https://gcam-ports.com")


if __name__ == "__main__":
    main()
