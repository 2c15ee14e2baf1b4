from screenshot_crawler.core.devices import mobile_presets  # type: ignore[import]

from tests.helpers.pytest_import import pytest
from tests.helpers.crawler_imports import (
    DESKTOP,
    ConfigurationError,
    DesktopProfile,
    DeviceSelection,
    MobileProfile,
    normalize_device_type,
    resolve,
)
from tests.helpers.fakes import PIXEL_5

CATALOG = {"Pixel 5": PIXEL_5}


def test_pc_ignores_device_name():
    profile = resolve(DeviceSelection("pc", "Pixel 5"), CATALOG)

    assert profile == DESKTOP
    assert profile.context_options() == {"viewport": {"width": 1366, "height": 768}}


def test_known_mobile_preset_builds_full_emulation():
    profile = resolve(DeviceSelection("mobile", "Pixel 5"), CATALOG)

    assert isinstance(profile, MobileProfile)
    assert profile.name == "Pixel 5"
    assert profile.context_options() == {
        "viewport": {"width": 393, "height": 727},
        "user_agent": PIXEL_5["user_agent"],
        "device_scale_factor": 2.75,
        "has_touch": True,
        "is_mobile": True,
    }


@pytest.mark.parametrize("name", [None, "", "Nokia 3310"])
def test_unknown_mobile_preset_falls_back_to_desktop(name):
    profile = resolve(DeviceSelection("mobile", name), CATALOG)

    assert isinstance(profile, DesktopProfile)


@pytest.mark.parametrize("raw, expected", [("PC", "pc"), ("Mobile", "mobile"), (" mobile ", "mobile")])
def test_normalize_device_type(raw, expected):
    assert normalize_device_type(raw) == expected


def test_normalize_device_type_rejects_unknown_values():
    with pytest.raises(ConfigurationError):
        normalize_device_type("tablet")


def test_mobile_presets_skip_desktop_descriptors():
    catalog = {
        "Desktop Chrome": {"is_mobile": False},
        "Pixel 5": PIXEL_5,
        "iPad Mini": {"is_mobile": True},
    }

    assert mobile_presets(catalog) == ["Pixel 5", "iPad Mini"]
