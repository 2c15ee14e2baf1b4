"""Browser session used by the crawler: one browser, one page, driven sequentially."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from ..core.devices import DeviceProfile

logger = logging.getLogger(__name__)

NETWORK_IDLE = "networkidle"


class BrowserSession(Protocol):
    """Capabilities the crawl engine needs from a browser automation backend."""

    @property
    def current_url(self) -> str: ...

    @property
    def device_catalog(self) -> Mapping[str, Dict[str, Any]]: ...

    def open(self, profile: DeviceProfile) -> None: ...

    def navigate(self, url: str, wait_until: str = NETWORK_IDLE) -> None: ...

    def apply_profile(self, profile: DeviceProfile) -> None: ...

    def evaluate_links(self, script: str) -> List[str]: ...

    def content(self) -> str: ...

    def capture_full_page(self, path: Path) -> None: ...

    def close(self) -> None: ...


class PlaywrightSession:
    """``BrowserSession`` backed by Playwright's synchronous Chromium driver.

    Used as a context manager: entering starts the Playwright driver (which is
    enough to read :attr:`device_catalog`), :meth:`open` launches the browser
    and leaving the block closes everything exactly once.
    """

    def __init__(self, *, headless: bool = True, nav_timeout_ms: Optional[int] = None) -> None:
        self.headless = headless
        self.nav_timeout_ms = nav_timeout_ms
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._profile: Optional[DeviceProfile] = None
        self._closed = False

    def __enter__(self) -> "PlaywrightSession":
        self.start()
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._playwright is None:
            self._playwright = sync_playwright().start()

    @property
    def device_catalog(self) -> Mapping[str, Dict[str, Any]]:
        self.start()
        assert self._playwright is not None
        return self._playwright.devices

    def open(self, profile: DeviceProfile) -> None:
        self.start()
        assert self._playwright is not None
        if self._browser is None:
            self._browser = self._playwright.chromium.launch(headless=self.headless)
            logger.debug("Chromium launched (headless=%s)", self.headless)
        self._new_context(profile)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            if self._browser is not None:
                self._browser.close()
        finally:
            if self._playwright is not None:
                self._playwright.stop()
            self._browser = self._context = self._page = None
            self._playwright = None

    # ------------------------------------------------------------------
    # Page operations
    # ------------------------------------------------------------------
    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("browser session is not open")
        return self._page

    @property
    def current_url(self) -> str:
        return self.page.url

    def navigate(self, url: str, wait_until: str = NETWORK_IDLE) -> None:
        self.page.goto(url, wait_until=wait_until)

    def apply_profile(self, profile: DeviceProfile) -> None:
        # User agent, scale and touch are fixed per context; only the
        # viewport can change on a live page.
        if profile != self._profile:
            self._new_context(profile)
            return
        self.page.set_viewport_size(profile.context_options()["viewport"])

    def evaluate_links(self, script: str) -> List[str]:
        return list(self.page.evaluate(script))

    def content(self) -> str:
        return self.page.content()

    def capture_full_page(self, path: Path) -> None:
        self.page.screenshot(path=str(path), type="png", full_page=True)

    def _new_context(self, profile: DeviceProfile) -> None:
        if self._browser is None:
            raise RuntimeError("browser session is not open")
        if self._context is not None:
            self._context.close()
        self._context = self._browser.new_context(**profile.context_options())
        self._page = self._context.new_page()
        if self.nav_timeout_ms is not None:
            self._page.set_default_navigation_timeout(self.nav_timeout_ms)
        self._profile = profile
