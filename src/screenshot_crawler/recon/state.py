from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CrawlPhase(str, Enum):
    BOOTSTRAPPING = "bootstrapping"
    CRAWLING = "crawling"
    TERMINATED = "terminated"


@dataclass(slots=True)
class CrawlState:
    """Mutable bookkeeping for a single crawl run."""

    current_url: str
    visited: set[str] = field(default_factory=set)
    phase: CrawlPhase = CrawlPhase.BOOTSTRAPPING
    iterations: int = 0

    def mark_visited(self, url: str) -> None:
        self.visited.add(url)

    def next_unvisited(self, links: list[str]) -> str | None:
        """First link, in document order, that has not been visited yet."""

        for link in links:
            if link not in self.visited:
                return link
        return None
