"""In-memory stand-ins for the Playwright-backed browser session."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

PNG_BYTES = b"\x89PNG\r\n\x1a\n"

PIXEL_5 = {
    "user_agent": "Mozilla/5.0 (Linux; Android 11; Pixel 5) Mobile Safari/537.36",
    "viewport": {"width": 393, "height": 727},
    "device_scale_factor": 2.75,
    "is_mobile": True,
    "has_touch": True,
    "default_browser_type": "chromium",
}


class FakeSession:
    """Serves a fixed link graph: ``pages`` maps a URL to its anchors."""

    def __init__(
        self,
        pages: Optional[Mapping[str, List[str]]] = None,
        *,
        failing: Iterable[str] = (),
        catalog: Optional[Mapping[str, Dict[str, Any]]] = None,
        html: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.pages = dict(pages or {})
        self.failing = set(failing)
        self.catalog = dict(catalog or {})
        self.html = dict(html or {})
        self.navigations: List[tuple] = []
        self.captures: List[str] = []
        self.applied: List[Any] = []
        self.opened_with: Any = None
        self.close_calls = 0
        self.on_capture: Optional[Callable[[str], None]] = None
        self._url = "about:blank"

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.close()

    @property
    def device_catalog(self) -> Mapping[str, Dict[str, Any]]:
        return self.catalog

    @property
    def current_url(self) -> str:
        return self._url

    def open(self, profile: Any) -> None:
        self.opened_with = profile

    def navigate(self, url: str, wait_until: str = "networkidle") -> None:
        self.navigations.append((url, wait_until))
        if url in self.failing:
            raise TimeoutError(f"Timeout 30000ms exceeded navigating to {url}")
        self._url = url

    def apply_profile(self, profile: Any) -> None:
        self.applied.append(profile)

    def evaluate_links(self, script: str) -> List[str]:
        return list(self.pages.get(self._url, []))

    def content(self) -> str:
        return self.html.get(self._url, "<html><body></body></html>")

    def capture_full_page(self, path: Path) -> None:
        path.write_bytes(PNG_BYTES)
        self.captures.append(self._url)
        if self.on_capture is not None:
            self.on_capture(self._url)

    def close(self) -> None:
        self.close_calls += 1
