"""Exception hierarchy shared by the crawler stages."""

from __future__ import annotations

from typing import Optional


class ScreenshotCrawlerError(Exception):
    """Base class for every error raised by this package."""


class InvalidSeedUrlError(ScreenshotCrawlerError):
    """The seed URL is missing or is not an absolute URL."""


class ConfigurationError(ScreenshotCrawlerError):
    """A setting or device choice could not be interpreted."""


class CaptureError(ScreenshotCrawlerError):
    """Navigating to or capturing a single page failed."""

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"capture of {url} failed{detail}")


class ExtractionError(ScreenshotCrawlerError):
    """Links could not be read from the loaded document."""
