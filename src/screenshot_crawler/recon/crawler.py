"""Depth-first crawler that screenshots every page it walks through."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ..browser.session import NETWORK_IDLE, BrowserSession
from ..capture.page_capture import capture_page
from ..core.artifacts import CaptureOutcome, CrawlSummary
from ..core.config import CrawlerConfig, validate_seed_url
from ..core.devices import DeviceProfile, DeviceSelection, resolve
from .links import extract_links
from .state import CrawlPhase, CrawlState

logger = logging.getLogger(__name__)


@dataclass
class CrawlController:
    """Walks a site one link at a time and captures each page.

    From every page the crawler follows the first link, in document order,
    that it has not seen before. The walk ends on the first page whose links
    have all been seen; links left behind on earlier pages are not revisited.
    """

    config: CrawlerConfig
    session: BrowserSession
    selection: DeviceSelection
    catalog: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.profile: DeviceProfile = resolve(self.selection, self.catalog)
        self._state = CrawlState(current_url=self.config.seed_url)
        self.summary = CrawlSummary(seed_url=self.config.seed_url)

    @property
    def state(self) -> CrawlState:
        """Return the current mutable crawl state for observability tools."""

        return self._state

    # ------------------------------------------------------------------
    # Core workflow
    # ------------------------------------------------------------------
    def run(self) -> CrawlSummary:
        seed_url = validate_seed_url(self.config.seed_url)
        self._state = CrawlState(current_url=seed_url)
        self.summary = CrawlSummary(seed_url=seed_url, visited=self._state.visited)

        try:
            self._bootstrap(seed_url)
            self._state.phase = CrawlPhase.CRAWLING
            while self._state.phase is CrawlPhase.CRAWLING:
                self._step()
        finally:
            self._terminate()

        return self.summary

    def _bootstrap(self, seed_url: str) -> None:
        self.session.open(self.profile)
        self._state.mark_visited(seed_url)
        self._navigate(seed_url)
        self._capture(seed_url)

    def _step(self) -> None:
        state = self._state
        state.iterations += 1

        self._navigate(state.current_url)
        self._capture(state.current_url)

        if self._page_limit_reached():
            logger.info("Page limit of %d reached", self.config.max_pages)
            state.phase = CrawlPhase.TERMINATED
            return

        next_url = state.next_unvisited(extract_links(self.session))
        if next_url is None:
            logger.info("No unvisited links left on %s", state.current_url)
            state.phase = CrawlPhase.TERMINATED
            return

        state.mark_visited(next_url)
        state.current_url = next_url

    def _terminate(self) -> None:
        self._state.phase = CrawlPhase.TERMINATED
        self.session.close()

    # ------------------------------------------------------------------
    # Crawling primitives
    # ------------------------------------------------------------------
    def _navigate(self, url: str) -> None:
        try:
            self.session.navigate(url, wait_until=NETWORK_IDLE)
        except Exception as exc:
            logger.warning("Navigation to %s failed: %s", url, exc)

    def _capture(self, url: str) -> CaptureOutcome:
        outcome = capture_page(
            self.session,
            url,
            self.selection,
            self.profile,
            self.config.screenshot_root,
        )
        self.summary.outcomes.append(outcome)
        return outcome

    def _page_limit_reached(self) -> bool:
        limit = self.config.max_pages
        return limit is not None and len(self._state.visited) >= limit
