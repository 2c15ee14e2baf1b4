"""Single-page capture: device setup, network-idle navigation and the PNG write."""

from __future__ import annotations

import logging
from pathlib import Path

from ..browser.session import NETWORK_IDLE, BrowserSession
from ..core.artifacts import CaptureArtifact, CaptureOutcome
from ..core.devices import DeviceProfile, DeviceSelection
from ..core.errors import CaptureError
from ..core.naming import device_portion, ensure_directory, name_for

logger = logging.getLogger(__name__)


def plan_artifact(url: str, selection: DeviceSelection, root: Path) -> CaptureArtifact:
    name = name_for(url, selection.device_type, selection.device_name)
    return CaptureArtifact(
        source_url=url,
        device_portion=device_portion(selection.device_type, selection.device_name),
        file_path=root / name.directory / name.file_name,
    )


def capture_page(
    session: BrowserSession,
    url: str,
    selection: DeviceSelection,
    profile: DeviceProfile,
    root: Path,
) -> CaptureOutcome:
    """Navigates to ``url`` and writes a full-page screenshot.

    Never raises: any failure is logged and returned on the outcome so the
    caller can move on to the next page.
    """

    artifact = plan_artifact(url, selection, root)
    logger.info("Taking screenshot of %s...", url)

    try:
        ensure_directory(artifact.file_path.parent)
        session.apply_profile(profile)
        session.navigate(url, wait_until=NETWORK_IDLE)
        session.capture_full_page(artifact.file_path)
    except Exception as exc:
        error = CaptureError(url, exc)
        logger.error("Error taking screenshot of %s: %s", url, exc)
        return CaptureOutcome(artifact=artifact, error=error)

    logger.info("Screenshot saved as %s", artifact.file_path)
    return CaptureOutcome(artifact=artifact)
