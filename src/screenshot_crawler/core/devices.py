"""Maps the operator's device choice onto a concrete viewport or emulation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEVICE_TYPE_PC = "pc"
DEVICE_TYPE_MOBILE = "mobile"
DEVICE_TYPES = (DEVICE_TYPE_PC, DEVICE_TYPE_MOBILE)

DESKTOP_WIDTH = 1366
DESKTOP_HEIGHT = 768


@dataclass(frozen=True, slots=True)
class DeviceSelection:
    """What the operator picked: a device type and, for mobile, a preset name."""

    device_type: str
    device_name: Optional[str] = None

    @property
    def is_mobile(self) -> bool:
        return self.device_type == DEVICE_TYPE_MOBILE


@dataclass(frozen=True, slots=True)
class DesktopProfile:
    width: int = DESKTOP_WIDTH
    height: int = DESKTOP_HEIGHT

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}

    def context_options(self) -> Dict[str, Any]:
        return {"viewport": self.viewport}


@dataclass(frozen=True, slots=True)
class MobileProfile:
    """Full emulation settings taken from a device preset."""

    name: str
    viewport: Dict[str, int] = field(hash=False)
    user_agent: str = ""
    scale_factor: float = 1.0
    touch: bool = True
    is_mobile: bool = True

    def context_options(self) -> Dict[str, Any]:
        return {
            "viewport": dict(self.viewport),
            "user_agent": self.user_agent,
            "device_scale_factor": self.scale_factor,
            "has_touch": self.touch,
            "is_mobile": self.is_mobile,
        }


DeviceProfile = Union[DesktopProfile, MobileProfile]

DESKTOP = DesktopProfile()


def normalize_device_type(value: Optional[str]) -> str:
    """Turns ``PC``/``Mobile`` (any case) into the internal device type."""

    normalized = (value or "").strip().lower()
    if normalized not in DEVICE_TYPES:
        raise ConfigurationError(
            f"unknown device type {value!r}; expected one of {', '.join(DEVICE_TYPES)}"
        )
    return normalized


def profile_from_descriptor(name: str, descriptor: Mapping[str, Any]) -> MobileProfile:
    viewport = descriptor.get("viewport") or {}
    return MobileProfile(
        name=name,
        viewport={"width": int(viewport["width"]), "height": int(viewport["height"])},
        user_agent=descriptor.get("user_agent", ""),
        scale_factor=float(descriptor.get("device_scale_factor", 1)),
        touch=bool(descriptor.get("has_touch", False)),
        is_mobile=bool(descriptor.get("is_mobile", False)),
    )


def resolve(
    selection: DeviceSelection, catalog: Mapping[str, Mapping[str, Any]]
) -> DeviceProfile:
    """Resolves ``selection`` against the device ``catalog``.

    PC always yields the fixed desktop profile. An unknown or missing mobile
    preset also falls back to the desktop profile instead of failing.
    """

    if not selection.is_mobile:
        return DESKTOP

    name = selection.device_name
    if not name or name not in catalog:
        logger.warning(
            "Device preset %r is not known; using the desktop viewport", name
        )
        return DESKTOP

    return profile_from_descriptor(name, catalog[name])


def mobile_presets(catalog: Mapping[str, Mapping[str, Any]]) -> List[str]:
    """Catalog names flagged ``is_mobile``, in catalog order."""

    return [name for name, descriptor in catalog.items() if descriptor.get("is_mobile")]
