"""
Command-line interface for the camera port catalog.

Usage:
    gcam-ports brands
    gcam-ports devices samsung
    gcam-ports --json search "galaxy s25"
    gcam-ports stats
    gcam-ports url samsung "Galaxy S25 Ultra"
    gcam-ports --timeout 10000 live oneplus
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from .client import GCamPorts
from .common.config_loader import load_client_defaults
from .common.errors import ConfigError, LiveFetchError
from .common.log_config import setup_logging

logger = logging.getLogger(__name__)


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def cmd_brands(gcam: GCamPorts, args: argparse.Namespace) -> int:
    brands = gcam.get_supported_brands()

    if args.json:
        _print_json({key: brand.to_dict() for key, brand in brands.items()})
        return 0

    for key, brand in brands.items():
        print(f"  {key:<12} {brand.name:<12} {gcam.get_device_count(key):>3} devices")
    return 0


def cmd_devices(gcam: GCamPorts, args: argparse.Namespace) -> int:
    if not gcam.is_brand_supported(args.brand):
        print(f"Unknown brand: {args.brand}", file=sys.stderr)
        return 1

    devices = gcam.get_devices_by_brand(args.brand)

    if args.json:
        _print_json([device.to_dict() for device in devices])
        return 0

    for device in devices:
        print(f"  {device.name} ({device.model}) - {device.processor}, Android {device.android_version}")
    return 0


def cmd_search(gcam: GCamPorts, args: argparse.Namespace) -> int:
    results = gcam.search_devices(args.query)

    if args.json:
        _print_json([device.to_dict() for device in results])
        return 0

    if not results:
        print(f"No devices match '{args.query}'")
        return 0

    for device in results:
        print(f"  [{device.brand}] {device.name} ({device.model})")
    return 0


def cmd_stats(gcam: GCamPorts, args: argparse.Namespace) -> int:
    stats = gcam.get_stats()

    if args.json:
        _print_json(stats.to_dict())
        return 0

    print("=" * 40)
    print("Catalog Statistics")
    print("=" * 40)
    print(f"  Total brands:  {stats.total_brands}")
    print(f"  Total devices: {stats.total_devices}")
    for brand, count in sorted(stats.devices_by_brand.items(), key=lambda item: -item[1]):
        print(f"    {brand:<12} {count:>3}")
    return 0


def cmd_url(gcam: GCamPorts, args: argparse.Namespace) -> int:
    url = gcam.generate_device_url(args.brand, args.model)
    if url is None:
        print(f"Unknown brand: {args.brand}", file=sys.stderr)
        return 1

    print(url)
    return 0


def cmd_live(gcam: GCamPorts, args: argparse.Namespace) -> int:
    try:
        devices = gcam.fetch_live_devices_sync(args.brand)
    except LiveFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        _print_json([device.to_dict() for device in devices])
        return 0

    print(f"Found {len(devices)} live devices for {args.brand}")
    for device in devices:
        print(f"  {device.name}: {device.url}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gcam-ports",
        description="Browse Google Camera ports by phone brand",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--show-http", action="store_true", help="Include urllib3/requests connection logs")
    parser.add_argument("--timeout", type=int, help="Live fetch timeout in milliseconds")
    parser.add_argument("--user-agent", help="User-Agent header for live fetches")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("brands", help="List supported brands").set_defaults(func=cmd_brands)

    devices = subparsers.add_parser("devices", help="List a brand's devices")
    devices.add_argument("brand")
    devices.set_defaults(func=cmd_devices)

    search = subparsers.add_parser("search", help="Search devices across brands")
    search.add_argument("query")
    search.set_defaults(func=cmd_search)

    subparsers.add_parser("stats", help="Show catalog statistics").set_defaults(func=cmd_stats)

    url = subparsers.add_parser("url", help="Generate a device page URL")
    url.add_argument("brand")
    url.add_argument("model")
    url.set_defaults(func=cmd_url)

    live = subparsers.add_parser("live", help="Fetch a brand's current device list (network)")
    live.add_argument("brand")
    live.set_defaults(func=cmd_live)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, show_http=args.show_http)

    try:
        options = load_client_defaults()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Client defaults: timeout=%dms user_agent=%s", options.timeout, options.user_agent)

    with GCamPorts(options, timeout=args.timeout, user_agent=args.user_agent) as gcam:
        return args.func(gcam, args)


if __name__ == "__main__":
    sys.exit(main())
