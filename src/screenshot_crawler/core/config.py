"""Runtime configuration and seed URL validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from .errors import ConfigurationError, InvalidSeedUrlError

DEFAULT_SCREENSHOT_DIR = "screenshots"
DEFAULT_NAV_TIMEOUT_MS = 30_000


@dataclass(slots=True)
class CrawlerConfig:
    """Holds runtime options for a full crawl execution."""

    seed_url: str
    screenshot_root: Path
    headless: bool = True
    nav_timeout_ms: int = DEFAULT_NAV_TIMEOUT_MS
    max_pages: Optional[int] = None
    log_level: str = "INFO"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.lower() in {"1", "true", "yes"}


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def load_configuration(
    seed_url: str,
    *,
    screenshot_dir: Optional[str] = None,
    headless: Optional[bool] = None,
    nav_timeout_ms: Optional[int] = None,
    max_pages: Optional[int] = None,
) -> CrawlerConfig:
    """Builds a ``CrawlerConfig`` from CLI input and environment variables.

    Explicit arguments win over the environment, which wins over defaults.
    """

    load_dotenv()  # Loads .env values if present

    root = screenshot_dir or os.getenv("SCREENSHOT_DIR") or DEFAULT_SCREENSHOT_DIR
    timeout_value = nav_timeout_ms if nav_timeout_ms is not None else _env_int("NAV_TIMEOUT_MS")
    page_limit = max_pages if max_pages is not None else _env_int("MAX_PAGES")

    if timeout_value is not None and timeout_value <= 0:
        raise ConfigurationError("navigation timeout must be positive")
    if page_limit is not None and page_limit <= 0:
        raise ConfigurationError("max pages must be positive")

    return CrawlerConfig(
        seed_url=seed_url,
        screenshot_root=Path(root),
        headless=headless if headless is not None else _env_flag("HEADLESS", True),
        nav_timeout_ms=timeout_value if timeout_value is not None else DEFAULT_NAV_TIMEOUT_MS,
        max_pages=page_limit,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def validate_seed_url(url: Optional[str]) -> str:
    """Returns ``url`` unchanged if it is an absolute URL, else raises."""

    if not url or not url.strip():
        raise InvalidSeedUrlError("no URL provided")
    try:
        parsed = urlparse(url)
        parsed.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise InvalidSeedUrlError(f"invalid URL {url!r}: {exc}") from exc

    if parsed.scheme == "file" and parsed.path:
        return url
    if not parsed.scheme or not parsed.netloc or any(ch.isspace() for ch in parsed.netloc):
        raise InvalidSeedUrlError(f"invalid URL {url!r}: an absolute URL is required")
    return url
