"""Reads outbound anchor links from the page currently loaded in the session."""

from __future__ import annotations

import logging
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from ..browser.session import BrowserSession
from ..core.errors import ExtractionError

logger = logging.getLogger(__name__)

ANCHOR_HREFS_SCRIPT = (
    "() => Array.from(document.querySelectorAll('a[href]'), (anchor) => anchor.href)"
)


def links_from_html(html: str, base_url: str) -> List[str]:
    """Absolute ``<a href>`` targets of ``html`` in document order."""

    soup = BeautifulSoup(html, "html.parser")
    links: List[str] = []
    for anchor in soup.find_all("a", href=True):
        href = anchor.get("href")
        if href:
            links.append(urljoin(base_url, href))
    return links


def _read_links(session: BrowserSession) -> List[str]:
    try:
        return [link for link in session.evaluate_links(ANCHOR_HREFS_SCRIPT) if link]
    except Exception as exc:
        logger.debug("In-page link evaluation failed (%s); parsing page HTML", exc)

    try:
        return links_from_html(session.content(), session.current_url)
    except Exception as exc:
        raise ExtractionError(f"could not read links from the page: {exc}") from exc


def extract_links(session: BrowserSession) -> List[str]:
    """Links of the loaded page; an unreadable page counts as having none."""

    try:
        return _read_links(session)
    except ExtractionError as exc:
        logger.debug("%s", exc)
        return []
