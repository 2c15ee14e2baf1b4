"""Deterministic file names and folders for captured screenshots."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .devices import DEVICE_TYPE_MOBILE

MAX_STEM_LENGTH = 100
PC_PORTION = "pc"

_SCHEME_RE = re.compile(r"^https?://")
_WWW_RE = re.compile(r"^www\.")
_SEPARATORS_RE = re.compile(r"[/:.]")


@dataclass(frozen=True, slots=True)
class ArtifactName:
    file_name: str
    directory: str


def device_portion(device_type: str, device_name: Optional[str] = None) -> str:
    if device_type == DEVICE_TYPE_MOBILE and device_name:
        return device_name.lower()
    return PC_PORTION


def filename_for(url: str, device_type: str, device_name: Optional[str] = None) -> str:
    stem = _SCHEME_RE.sub("", url, count=1)
    stem = _WWW_RE.sub("", stem, count=1)
    if stem.endswith("/"):
        stem = stem[:-1]
    stem = _SEPARATORS_RE.sub("_", stem)[:MAX_STEM_LENGTH]
    return f"{stem}_{device_portion(device_type, device_name)}.png"


def directory_for(device_type: str, device_name: Optional[str] = None) -> str:
    return f"{device_portion(device_type, device_name)}-screenshot"


def name_for(url: str, device_type: str, device_name: Optional[str] = None) -> ArtifactName:
    return ArtifactName(
        file_name=filename_for(url, device_type, device_name),
        directory=directory_for(device_type, device_name),
    )


def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
