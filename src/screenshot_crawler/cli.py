"""Command line interface for the screenshot crawler."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Mapping, Optional, Sequence

from .browser.session import BrowserSession, PlaywrightSession
from .core.config import CrawlerConfig, load_configuration, validate_seed_url
from .core.devices import DEVICE_TYPE_MOBILE, DEVICE_TYPES, DeviceSelection, mobile_presets
from .core.errors import ConfigurationError, InvalidSeedUrlError
from .prompts import choose_device_type, choose_mobile_device
from .recon.crawler import CrawlController

SessionFactory = Callable[[CrawlerConfig], Any]


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Crawl a website and save a full-page screenshot of every visited page"
    )
    parser.add_argument("url", nargs="?", help="Seed URL where the crawl starts")
    parser.add_argument(
        "--device",
        type=str.lower,
        choices=DEVICE_TYPES,
        help="Device type; asked interactively when omitted",
    )
    parser.add_argument(
        "--device-name",
        help="Mobile device preset (e.g. 'Pixel 5'); asked interactively when omitted",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Screenshot root folder (default: $SCREENSHOT_DIR or ./screenshots)",
    )
    parser.add_argument(
        "--headless",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run Chromium headless (default comes from .env/environment, else on)",
    )
    parser.add_argument("--max-pages", type=int, default=None, help="Stop after this many distinct pages")
    parser.add_argument("--timeout-ms", type=int, default=None, help="Navigation timeout in ms")
    parser.add_argument("--list-devices", action="store_true", help="Print the known mobile presets and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def default_session_factory(config: CrawlerConfig) -> PlaywrightSession:
    return PlaywrightSession(headless=config.headless, nav_timeout_ms=config.nav_timeout_ms)


def configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def select_device(args: argparse.Namespace, catalog: Mapping[str, Any]) -> DeviceSelection:
    device_type = args.device or choose_device_type()
    device_name = None
    if device_type == DEVICE_TYPE_MOBILE:
        device_name = args.device_name or choose_mobile_device(catalog)
    return DeviceSelection(device_type=device_type, device_name=device_name)


def list_devices(session: BrowserSession) -> None:
    for name in mobile_presets(session.device_catalog):
        print(name)


def run_cli(
    argv: Optional[Sequence[str]] = None,
    *,
    session_factory: SessionFactory = default_session_factory,
) -> int:
    args = parse_arguments(argv)

    if args.list_devices:
        try:
            config = load_configuration(args.url or "", headless=args.headless)
        except ConfigurationError as exc:
            print(f"[!] {exc}", file=sys.stderr)
            return 1
        with session_factory(config) as session:
            list_devices(session)
        return 0

    try:
        seed_url = validate_seed_url(args.url)
        config = load_configuration(
            seed_url,
            screenshot_dir=args.output_dir,
            headless=args.headless,
            nav_timeout_ms=args.timeout_ms,
            max_pages=args.max_pages,
        )
    except InvalidSeedUrlError as exc:
        print(f"[!] Invalid URL provided: {exc}", file=sys.stderr)
        return 1
    except ConfigurationError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    configure_logging(config.log_level, args.verbose)

    with session_factory(config) as session:
        catalog = session.device_catalog
        selection = select_device(args, catalog)

        print(f"[*] Crawling {seed_url} as {selection.device_name or selection.device_type}")
        controller = CrawlController(config, session, selection, catalog)
        summary = controller.run()

    print(f"[+] {len(summary.saved_files)} screenshot(s) saved under {config.screenshot_root}")
    if summary.failures:
        print(f"[!] {len(summary.failures)} page(s) could not be captured")
        for outcome in summary.failures:
            print(f" - {outcome.url}")
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
