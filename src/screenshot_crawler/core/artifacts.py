"""Result structures produced by the capture and crawl stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set, Tuple

from .errors import CaptureError


@dataclass(frozen=True)
class CaptureArtifact:
    """Where the screenshot of ``source_url`` goes."""

    source_url: str
    device_portion: str
    file_path: Path


@dataclass(frozen=True)
class CaptureOutcome:
    """Result of one capture attempt; failures carry the error instead of raising."""

    artifact: CaptureArtifact
    error: Optional[CaptureError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def url(self) -> str:
        return self.artifact.source_url


@dataclass
class CrawlSummary:
    """In-memory record of a finished crawl."""

    seed_url: str
    outcomes: List[CaptureOutcome] = field(default_factory=list)
    visited: Set[str] = field(default_factory=set)

    @property
    def saved_files(self) -> Tuple[Path, ...]:
        return tuple(o.artifact.file_path for o in self.outcomes if o.ok)

    @property
    def failures(self) -> Tuple[CaptureOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.ok)
